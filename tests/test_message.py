from datetime import datetime, timezone

from deskbot.message import CallbackQuery, Message, MessageType, Update
from deskbot.users import ChatType


def _text_message():
    return {
        "message_id": 5,
        "date": 0,
        "chat": {"id": 7, "type": "private", "username": "alice"},
        "from": {"id": 3, "first_name": "Alice", "username": "alice"},
        "text": "hello",
    }


def test_text_message_fields():
    msg = Message.from_json(_text_message())
    assert msg.id == 5
    assert msg.type is MessageType.TEXT
    assert msg.string == "hello"
    assert msg.chat.id == 7
    assert msg.chat.type is ChatType.PRIVATE
    assert msg.from_user.username == "alice"
    assert msg.from_user.id == 3
    assert msg.date == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_message_str():
    msg = Message.from_json(_text_message())
    assert str(msg) == "Telegram::Message(id=5; date=01.01.1970 00:00:00; chat=Chat(7); type=0)"


def test_optional_fields_absent():
    msg = Message.from_json({"message_id": 1, "text": "x"})
    assert msg.forward_date is None
    assert msg.reply_to_message is None
    assert msg.from_user.id == 0


def test_later_payload_wins():
    data = _text_message()
    data["photo"] = [{"file_id": "a", "width": 10}, {"file_id": "b"}]
    msg = Message.from_json(data)
    assert msg.type is MessageType.PHOTO
    assert msg.string == "hello"
    assert [p.file_id for p in msg.photo] == ["a", "b"]


def test_new_chat_photo_appends_to_photo():
    msg = Message.from_json(
        {"photo": [{"file_id": "a"}], "new_chat_photo": [{"file_id": "c"}]}
    )
    assert msg.type is MessageType.NEW_CHAT_PHOTO
    assert [p.file_id for p in msg.photo] == ["a", "c"]


def test_reply_and_forward():
    data = _text_message()
    data["reply_to_message"] = {"message_id": 2, "text": "earlier"}
    data["forward_from"] = {"id": 9, "username": "bob"}
    data["forward_date"] = 0
    msg = Message.from_json(data)
    assert msg.reply_to_message.id == 2
    assert msg.reply_to_message.string == "earlier"
    assert msg.forward_from.username == "bob"
    assert msg.forward_date == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_service_messages():
    assert Message.from_json({"delete_chat_photo": True}).boolean is True
    created = Message.from_json({"group_chat_created": True})
    assert created.type is MessageType.GROUP_CHAT_CREATED
    title = Message.from_json({"new_chat_title": "Team"})
    assert (title.type, title.string) == (MessageType.NEW_CHAT_TITLE, "Team")
    left = Message.from_json({"left_chat_participant": {"id": 4, "username": "zed"}})
    assert left.type is MessageType.LEFT_CHAT_PARTICIPANT
    assert left.user.username == "zed"


def test_location_and_contact():
    loc = Message.from_json({"location": {"latitude": 1.5, "longitude": 2.5}})
    assert loc.type is MessageType.LOCATION
    assert (loc.location.latitude, loc.location.longitude) == (1.5, 2.5)
    contact = Message.from_json({"contact": {"first_name": "Ann", "user_id": 8}})
    assert contact.type is MessageType.CONTACT
    assert contact.contact.user_id == 8


def test_callback_query_default_is_empty():
    assert CallbackQuery().is_empty is True


def test_callback_query_from_json():
    query = CallbackQuery.from_json(
        {"id": "q1", "from": {"username": "alice"}, "data": "yes", "message": {"text": "t"}}
    )
    assert query.is_empty is False
    assert query.id == "q1"
    assert query.data == "yes"
    assert query.message.string == "t"
    assert query.chat_instance == ""
    assert str(query) == "Telegram::CallbackQuery(id=q1; From=alice"


def test_update_from_json():
    update = Update.from_json({"update_id": 11, "message": _text_message()})
    assert update.id == 11
    assert update.message.string == "hello"
    assert update.callback_query.is_empty is True
    assert str(update) == "Telegram::Update(id=11; message=Message(5))"


def test_update_with_callback():
    update = Update.from_json({"update_id": 1, "callback_query": {"id": "z"}})
    assert update.callback_query.is_empty is False
    assert update.callback_query.id == "z"