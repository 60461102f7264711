"""Reply markup objects that can accompany an outgoing message."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence


def _serialize_json(obj: Mapping[str, Any]) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class GenericReply:
    """Base reply markup. Built without ``selective`` it is invalid and not sent."""

    def __init__(self, selective: bool | None = None) -> None:
        self._valid = selective is not None
        self.selective = bool(selective)

    @property
    def is_valid(self) -> bool:
        return self._valid

    def serialize(self) -> str:
        return ""


class ForceReply(GenericReply):
    """Makes the client show a reply interface to the user."""

    force_reply = True

    def __init__(self, selective: bool = False) -> None:
        super().__init__(selective)

    def serialize(self) -> str:
        return _serialize_json({"force_reply": self.force_reply, "selective": self.selective})


class ReplyKeyboardHide(GenericReply):
    """Asks clients to hide the custom keyboard."""

    hide_keyboard = True

    def __init__(self, selective: bool = False) -> None:
        super().__init__(selective)

    def serialize(self) -> str:
        return _serialize_json({"hide_keyboard": self.hide_keyboard, "selective": self.selective})


class ReplyKeyboardRemove(GenericReply):
    """Asks clients to remove the custom keyboard."""

    remove_keyboard = True

    def __init__(self, selective: bool = False) -> None:
        super().__init__(selective)

    def serialize(self) -> str:
        obj: dict[str, Any] = {"remove_keyboard": self.remove_keyboard}
        if self.selective:
            obj["selective"] = self.selective
        return _serialize_json(obj)


class ReplyKeyboardMarkup(GenericReply):
    """A custom keyboard made of rows of button labels."""

    def __init__(
        self,
        keyboard: Iterable[Sequence[str]],
        resize_keyboard: bool = False,
        one_time_keyboard: bool = False,
        selective: bool = False,
    ) -> None:
        super().__init__(selective)
        self.keyboard = [list(row) for row in keyboard]
        self.resize_keyboard = resize_keyboard
        self.one_time_keyboard = one_time_keyboard

    def serialize(self) -> str:
        return _serialize_json(
            {
                "keyboard": self.keyboard,
                "resize_keyboard": self.resize_keyboard,
                "one_time_keyboard": self.one_time_keyboard,
                "selective": self.selective,
            }
        )


@dataclass(frozen=True)
class InlineKeyboardButton:
    """A button shown inline under a message. A URL takes precedence over all else."""

    text: str
    url: str = ""
    callback_data: str = ""
    switch_inline_query: str = ""
    switch_inline_query_current_chat: str = ""

    def to_json_object(self) -> dict[str, str]:
        obj = {"text": self.text}
        if self.url:
            obj["url"] = self.url
            return obj
        optional = {
            "callback_data": self.callback_data,
            "switch_inline_query": self.switch_inline_query,
            "switch_inline_query_current_chat": self.switch_inline_query_current_chat,
        }
        obj.update({key: value for key, value in optional.items() if value})
        return obj


class InlineKeyboardMarkup(GenericReply):
    """An inline keyboard; every button gets a row of its own."""

    def __init__(self, buttons: Iterable[InlineKeyboardButton]) -> None:
        super().__init__(False)
        self.buttons = list(buttons)

    def serialize(self) -> str:
        rows = [[button.to_json_object()] for button in self.buttons]
        return _serialize_json({"inline_keyboard": rows})