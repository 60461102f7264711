"""Users and chats as reported by the chat service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .media import _int_value, _str_value


@dataclass
class User:
    """A chat participant."""

    id: int = 0
    firstname: str = ""
    lastname: str = ""
    username: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> User:
        return cls(
            id=_int_value(data, "id"),
            firstname=_str_value(data, "first_name"),
            lastname=_str_value(data, "last_name"),
            username=_str_value(data, "username"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::User(id={self.id}; firstname={self.firstname}; "
            f"lastname={self.lastname}; username={self.username})"
        )


class ChatType(Enum):
    """Kinds of chat."""

    PRIVATE = 0
    GROUP = 1
    CHANNEL = 2


_CHAT_TYPES = {
    "private": ChatType.PRIVATE,
    "group": ChatType.GROUP,
    "channel": ChatType.CHANNEL,
}


@dataclass
class Chat:
    """A conversation; ``type`` is None when the service reports an unknown kind."""

    id: int = 0
    type: ChatType | None = None
    title: str = ""
    username: str = ""
    firstname: str = ""
    lastname: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Chat:
        return cls(
            id=_int_value(data, "id"),
            type=_CHAT_TYPES.get(_str_value(data, "type")),
            username=_str_value(data, "username"),
            firstname=_str_value(data, "first_name"),
            lastname=_str_value(data, "last_name"),
        )

    def __str__(self) -> str:
        kind = "" if self.type is None else self.type.value
        return (
            f"Telegram::Chat(id={self.id}; type={kind}; title={self.title}; "
            f"username={self.username}; firstname={self.firstname}; "
            f"lastname={self.lastname})"
        )