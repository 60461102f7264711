"""Attachment records carried by chat messages: photos, audio, files and the like."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _int_value(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    """Read a whole number that fits in 32 bits, or return ``default``."""
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float):
        if not value.is_integer():
            return default
        value = int(value)
    if not _INT_MIN <= value <= _INT_MAX:
        return default
    return value


def _float_value(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _str_value(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _object_value(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _list_value(data: Mapping[str, Any], key: str) -> list:
    value = data.get(key)
    return value if isinstance(value, list) else []


@dataclass
class PhotoSize:
    """One size of a photo or thumbnail."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    file_size: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PhotoSize:
        return cls(
            file_id=_str_value(data, "file_id"),
            width=_int_value(data, "width"),
            height=_int_value(data, "height"),
            file_size=_int_value(data, "file_size"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::PhotoSize(fileId={self.file_id}; width={self.width}; "
            f"height={self.height}; fileSize={self.file_size})"
        )


@dataclass
class Audio:
    """An audio file attached to a message."""

    file_id: str = ""
    duration: int = 0
    performer: str = ""
    title: str = ""
    mime_type: str = ""
    file_size: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Audio:
        return cls(
            file_id=_str_value(data, "file_id"),
            duration=_int_value(data, "duration"),
            performer=_str_value(data, "performer"),
            title=_str_value(data, "title"),
            mime_type=_str_value(data, "mime_type"),
            file_size=_int_value(data, "file_size"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Audio(fileId={self.file_id}; duration={self.duration}; "
            f"performer={self.performer}; title={self.title}; "
            f"mimeType={self.mime_type}; fileSize={self.file_size})"
        )


@dataclass
class Document:
    """A general file attached to a message."""

    file_id: str = ""
    thumb: PhotoSize = field(default_factory=PhotoSize)
    file_name: str = ""
    mime_type: str = ""
    file_size: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Document:
        return cls(
            file_id=_str_value(data, "file_id"),
            thumb=PhotoSize.from_json(_object_value(data, "thumb")),
            file_name=_str_value(data, "file_name"),
            mime_type=_str_value(data, "mime_type"),
            file_size=_int_value(data, "file_size"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Document(fileId={self.file_id}; "
            f"thumb=PhotoSize({self.thumb.file_id}); fileName={self.file_name}; "
            f"mimeType={self.mime_type}; fileSize={self.file_size})"
        )


@dataclass
class Sticker:
    """A sticker attached to a message."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    thumb: PhotoSize = field(default_factory=PhotoSize)
    file_size: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Sticker:
        return cls(
            file_id=_str_value(data, "file_id"),
            width=_int_value(data, "width"),
            height=_int_value(data, "height"),
            thumb=PhotoSize.from_json(_object_value(data, "thumb")),
            file_size=_int_value(data, "file_size"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Sticker(fileId={self.file_id}; width={self.width}; "
            f"height={self.height}; thumb=PhotoSize({self.thumb.file_id}); "
            f"fileSize={self.file_size})"
        )


@dataclass
class Video:
    """A video attached to a message. The size is kept as text."""

    file_id: str = ""
    width: int = 0
    height: int = 0
    duration: int = 0
    thumb: PhotoSize = field(default_factory=PhotoSize)
    mime_type: str = ""
    file_size: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Video:
        return cls(
            file_id=_str_value(data, "file_id"),
            width=_int_value(data, "width"),
            height=_int_value(data, "height"),
            duration=_int_value(data, "duration"),
            thumb=PhotoSize.from_json(_object_value(data, "thumb")),
            mime_type=_str_value(data, "mime_type"),
            file_size=str(_int_value(data, "file_size")),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Video(fileId={self.file_id}; width={self.width}; "
            f"height={self.height}; duration={self.duration}; "
            f"thumb=PhotoSize({self.thumb.file_id}); mimeType={self.mime_type}; "
            f"fileSize={self.file_size})"
        )


@dataclass
class Voice:
    """A voice note attached to a message."""

    file_id: str = ""
    duration: int = 0
    mime_type: str = ""
    file_size: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Voice:
        return cls(
            file_id=_str_value(data, "file_id"),
            duration=_int_value(data, "duration"),
            mime_type=_str_value(data, "mime_type"),
            file_size=_int_value(data, "file_size"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Voice(fileId={self.file_id}; duration={self.duration}; "
            f"mimeType={self.mime_type}; fileSize={self.file_size})"
        )


@dataclass
class Contact:
    """A shared contact."""

    phone_number: str = ""
    firstname: str = ""
    lastname: str = ""
    user_id: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Contact:
        return cls(
            phone_number=_str_value(data, "phone_number"),
            firstname=_str_value(data, "first_name"),
            lastname=_str_value(data, "last_name"),
            user_id=_int_value(data, "user_id"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Contact(phoneNumber={self.phone_number}; "
            f"firstname={self.firstname}; lastname={self.lastname}; "
            f"userId={self.user_id})"
        )


@dataclass
class Location:
    """A shared geographic location."""

    longitude: float = 0.0
    latitude: float = 0.0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Location:
        return cls(
            longitude=_float_value(data, "longitude"),
            latitude=_float_value(data, "latitude"),
        )

    def __str__(self) -> str:
        return (
            f"Telegram::Location(longitude={self.longitude:g}; "
            f"latitude={self.latitude:g})"
        )


@dataclass
class File:
    """A file ready to be downloaded from the chat service."""

    file_id: str
    file_size: int = -1
    file_path: str = ""

    def __str__(self) -> str:
        return (
            f"Telegram::File(fileId={self.file_id}; fileSize={self.file_size}; "
            f"filePath={self.file_path})"
        )