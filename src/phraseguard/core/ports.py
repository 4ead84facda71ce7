"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contract for the chat transport so that the core can
be reused with different backends. Every call may raise; the core treats such
failures as non-fatal.
"""

from __future__ import annotations

from typing import Protocol


class ChatTransport(Protocol):
    """Chat operations required by the moderation core."""

    async def delete_message(self, chat_id: int, message_id: int) -> None:
        ...

    async def send_message(self, chat_id: int, text: str) -> int:
        """Send text and return the id of the sent message."""
        ...

    async def is_privileged(self, chat_id: int, user_id: int) -> bool:
        ...

    async def ban_member(self, chat_id: int, user_id: int, revoke_messages: bool) -> None:
        ...
