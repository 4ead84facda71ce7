"""Telegram-to-core message mapping adapter.

This keeps Telethon-specific details out of the core pipeline.
"""

from __future__ import annotations

from typing import Optional

from telethon.tl.custom import Message
from telethon.tl.types import PeerUser

from phraseguard.core.models import IncomingMessage


def author_id_from_message(message: Message) -> Optional[int]:
    """Return the sending user's id, or None for channel/anonymous posts."""

    from_id = getattr(message, "from_id", None)
    if isinstance(from_id, PeerUser):
        return from_id.user_id
    return None


def _sender_is_bot(message: Message) -> bool:
    # Only the cached sender entity is consulted; no extra network round trip.
    sender = getattr(message, "sender", None)
    return bool(getattr(sender, "bot", False))


def build_message(message: Message, edited: bool = False) -> IncomingMessage:
    """Build a core IncomingMessage from a Telethon Message."""

    # Media without a caption and service messages carry no text to screen.
    text = getattr(message, "raw_text", None) or None
    if getattr(message, "action", None) is not None:
        text = None

    return IncomingMessage(
        chat_id=message.chat_id,
        message_id=message.id,
        author_id=author_id_from_message(message),
        text=text,
        edited=edited,
        from_bot=_sender_is_bot(message),
    )
