from __future__ import annotations

from telethon.tl.types import PeerChannel, PeerUser

from phraseguard.adapters.telegram_mapper import build_message


class DummySender:
    def __init__(self, bot: bool = False) -> None:
        self.bot = bot


class DummyMessage:
    def __init__(
        self,
        *,
        chat_id: int = -100123,
        message_id: int = 10,
        text: str = "hello",
        from_id=None,
        sender: "DummySender | None" = None,
        action=None,
    ) -> None:
        self.chat_id = chat_id
        self.id = message_id
        self.raw_text = text
        self.from_id = from_id
        self.sender = sender
        self.action = action


def test_build_message_from_user() -> None:
    message = DummyMessage(from_id=PeerUser(user_id=42), sender=DummySender())

    result = build_message(message)

    assert result.chat_id == -100123
    assert result.message_id == 10
    assert result.author_id == 42
    assert result.text == "hello"
    assert result.edited is False
    assert result.from_bot is False


def test_channel_post_has_no_author() -> None:
    message = DummyMessage(from_id=PeerChannel(channel_id=123))

    assert build_message(message).author_id is None


def test_media_without_caption_has_no_text() -> None:
    message = DummyMessage(text="", from_id=PeerUser(user_id=42))

    assert build_message(message).text is None


def test_service_message_has_no_text() -> None:
    message = DummyMessage(text="joined", from_id=PeerUser(user_id=42), action=object())

    assert build_message(message).text is None


def test_edited_and_bot_flags() -> None:
    message = DummyMessage(from_id=PeerUser(user_id=42), sender=DummySender(bot=True))

    result = build_message(message, edited=True)

    assert result.edited is True
    assert result.from_bot is True
