"""Moderation actions for flagged messages.

Each step is attempted once. A failed delete does not stop the ban attempt,
and neither failure is retried or escalated.
"""

from __future__ import annotations

import logging

from phraseguard.core.models import IncomingMessage
from phraseguard.core.ports import ChatTransport

LOGGER = logging.getLogger(__name__)


class ModerationExecutor:
    """Deletes flagged messages and bans their authors."""

    def __init__(self, transport: ChatTransport, revoke_messages: bool = True) -> None:
        self._transport = transport
        self._revoke_messages = revoke_messages

    async def execute(self, message: IncomingMessage) -> None:
        try:
            await self._transport.delete_message(message.chat_id, message.message_id)
            LOGGER.info("Deleted message %s in chat %s", message.message_id, message.chat_id)
        except Exception as exc:
            LOGGER.warning(
                "Failed to delete message %s in chat %s: %s",
                message.message_id,
                message.chat_id,
                exc,
            )

        if message.author_id is None:
            LOGGER.warning(
                "Message %s in chat %s has no author; nobody to ban",
                message.message_id,
                message.chat_id,
            )
            return

        try:
            await self._transport.ban_member(
                message.chat_id, message.author_id, self._revoke_messages
            )
            LOGGER.info("Banned user %s from chat %s", message.author_id, message.chat_id)
        except Exception as exc:
            LOGGER.warning(
                "Failed to ban user %s from chat %s: %s",
                message.author_id,
                message.chat_id,
                exc,
            )
