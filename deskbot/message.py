"""Incoming messages, callback queries and the updates that carry them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

from .media import (
    Audio,
    Contact,
    Document,
    Location,
    PhotoSize,
    Sticker,
    Video,
    Voice,
    _int_value,
    _list_value,
    _object_value,
    _str_value,
)
from .users import Chat, User


class MessageType(Enum):
    """What a message carries."""

    TEXT = 0
    AUDIO = 1
    DOCUMENT = 2
    PHOTO = 3
    STICKER = 4
    VIDEO = 5
    VOICE = 6
    CONTACT = 7
    LOCATION = 8
    NEW_CHAT_PARTICIPANT = 9
    LEFT_CHAT_PARTICIPANT = 10
    NEW_CHAT_TITLE = 11
    NEW_CHAT_PHOTO = 12
    DELETE_CHAT_PHOTO = 13
    GROUP_CHAT_CREATED = 14


def _timestamp(data: Mapping[str, Any], key: str) -> datetime:
    """The service value is read as milliseconds since the epoch."""
    return datetime.fromtimestamp(_int_value(data, key) / 1000, tz=timezone.utc)


def _photos(data: Mapping[str, Any], key: str) -> list[PhotoSize]:
    return [
        PhotoSize.from_json(item if isinstance(item, Mapping) else {})
        for item in _list_value(data, key)
    ]


@dataclass
class Message:
    """A chat message; the payload fields used depend on ``type``."""

    id: int = 0
    date: datetime | None = None
    chat: Chat = field(default_factory=Chat)
    from_user: User = field(default_factory=User)
    forward_from: User = field(default_factory=User)
    forward_date: datetime | None = None
    reply_to_message: Message | None = None
    type: MessageType | None = None
    string: str = ""
    user: User = field(default_factory=User)
    audio: Audio = field(default_factory=Audio)
    document: Document = field(default_factory=Document)
    photo: list[PhotoSize] = field(default_factory=list)
    sticker: Sticker = field(default_factory=Sticker)
    video: Video = field(default_factory=Video)
    voice: Voice = field(default_factory=Voice)
    contact: Contact = field(default_factory=Contact)
    location: Location = field(default_factory=Location)
    boolean: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Message:
        msg = cls(
            id=_int_value(data, "message_id"),
            date=_timestamp(data, "date"),
            chat=Chat.from_json(_object_value(data, "chat")),
        )
        if "from" in data:
            msg.from_user = User.from_json(_object_value(data, "from"))
        if "forward_from" in data:
            msg.forward_from = User.from_json(_object_value(data, "forward_from"))
        if "forward_date" in data:
            msg.forward_date = _timestamp(data, "forward_date")
        if "reply_to_message" in data:
            msg.reply_to_message = cls.from_json(_object_value(data, "reply_to_message"))

        # Later payload keys win, as the service never sends more than one.
        if "text" in data:
            msg.string = _str_value(data, "text")
            msg.type = MessageType.TEXT
        if "audio" in data:
            msg.audio = Audio.from_json(_object_value(data, "audio"))
            msg.type = MessageType.AUDIO
        if "document" in data:
            msg.document = Document.from_json(_object_value(data, "document"))
            msg.type = MessageType.DOCUMENT
        if "photo" in data:
            msg.photo.extend(_photos(data, "photo"))
            msg.type = MessageType.PHOTO
        if "sticker" in data:
            msg.sticker = Sticker.from_json(_object_value(data, "sticker"))
            msg.type = MessageType.STICKER
        if "video" in data:
            msg.video = Video.from_json(_object_value(data, "video"))
            msg.type = MessageType.VIDEO
        if "voice" in data:
            msg.voice = Voice.from_json(_object_value(data, "voice"))
            msg.type = MessageType.VOICE
        if "contact" in data:
            msg.contact = Contact.from_json(_object_value(data, "contact"))
            msg.type = MessageType.CONTACT
        if "location" in data:
            msg.location = Location.from_json(_object_value(data, "location"))
            msg.type = MessageType.LOCATION
        if "new_chat_participant" in data:
            msg.user = User.from_json(_object_value(data, "new_chat_participant"))
            msg.type = MessageType.NEW_CHAT_PARTICIPANT
        if "left_chat_participant" in data:
            msg.user = User.from_json(_object_value(data, "left_chat_participant"))
            msg.type = MessageType.LEFT_CHAT_PARTICIPANT
        if "new_chat_title" in data:
            msg.string = _str_value(data, "new_chat_title")
            msg.type = MessageType.NEW_CHAT_TITLE
        if "new_chat_photo" in data:
            msg.photo.extend(_photos(data, "new_chat_photo"))
            msg.type = MessageType.NEW_CHAT_PHOTO
        if "delete_chat_photo" in data:
            msg.boolean = True
            msg.type = MessageType.DELETE_CHAT_PHOTO
        if "group_chat_created" in data:
            msg.boolean = True
            msg.type = MessageType.GROUP_CHAT_CREATED
        return msg

    def __str__(self) -> str:
        date = "" if self.date is None else self.date.strftime("%d.%m.%Y %H:%M:%S")
        kind = "" if self.type is None else self.type.value
        return (
            f"Telegram::Message(id={self.id}; date={date}; "
            f"chat=Chat({self.chat.id}); type={kind})"
        )


@dataclass
class CallbackQuery:
    """A press on an inline keyboard button; ``empty`` when none was sent."""

    id: str = ""
    from_user: User = field(default_factory=User)
    message: Message = field(default_factory=Message)
    inline_message_id: str = ""
    chat_instance: str = ""
    data: str = ""
    game_short_name: str = ""
    empty: bool = True

    @property
    def is_empty(self) -> bool:
        return self.empty

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> CallbackQuery:
        query = cls(
            id=_str_value(data, "id"),
            from_user=User.from_json(_object_value(data, "from")),
            empty=False,
        )
        if "message" in data:
            query.message = Message.from_json(_object_value(data, "message"))
        for key in ("inline_message_id", "chat_instance", "data", "game_short_name"):
            if key in data:
                setattr(query, key, _str_value(data, key))
        return query

    def __str__(self) -> str:
        return f"Telegram::CallbackQuery(id={self.id}; From={self.from_user.username}"


@dataclass
class Update:
    """One entry from the update feed."""

    id: int = 0
    message: Message = field(default_factory=Message)
    callback_query: CallbackQuery = field(default_factory=CallbackQuery)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Update:
        update = cls(
            id=_int_value(data, "update_id"),
            message=Message.from_json(_object_value(data, "message")),
        )
        if "callback_query" in data:
            update.callback_query = CallbackQuery.from_json(
                _object_value(data, "callback_query")
            )
        return update

    def __str__(self) -> str:
        return f"Telegram::Update(id={self.id}; message=Message({self.message.id}))"