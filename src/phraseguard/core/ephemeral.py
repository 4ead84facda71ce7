"""Self-cleaning command replies.

The operator's command is deleted right away, the reply is sent, and a
detached task removes the reply once the visibility window has passed. The
caller returns as soon as the reply is sent.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from phraseguard.core.config import DEFAULT_CLEANUP_DELAY_SECONDS
from phraseguard.core.models import IncomingMessage
from phraseguard.core.ports import ChatTransport

LOGGER = logging.getLogger(__name__)


class EphemeralReplier:
    """Send replies that delete themselves after a fixed delay."""

    def __init__(
        self,
        transport: ChatTransport,
        cleanup_delay_seconds: float = DEFAULT_CLEANUP_DELAY_SECONDS,
    ) -> None:
        self._transport = transport
        self._delay = cleanup_delay_seconds
        # Strong references keep detached tasks alive until they finish.
        self._pending: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def respond_and_expire(self, original: IncomingMessage, text: str) -> None:
        try:
            await self._transport.delete_message(original.chat_id, original.message_id)
        except Exception as exc:
            LOGGER.warning(
                "Failed to delete command message %s in chat %s: %s",
                original.message_id,
                original.chat_id,
                exc,
            )

        try:
            reply_id = await self._transport.send_message(original.chat_id, text)
        except Exception as exc:
            LOGGER.warning("Failed to send reply in chat %s: %s", original.chat_id, exc)
            return

        task = asyncio.create_task(self._expire(original.chat_id, reply_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _expire(self, chat_id: int, message_id: int) -> None:
        await asyncio.sleep(self._delay)
        try:
            await self._transport.delete_message(chat_id, message_id)
        except Exception as exc:
            LOGGER.warning("Failed to delete reply %s in chat %s: %s", message_id, chat_id, exc)

    async def drain(self, timeout: Optional[float] = None) -> None:
        """Wait for scheduled deletions, used on shutdown and in tests."""

        if not self._pending:
            return
        LOGGER.info("Waiting for %s pending reply deletions", len(self._pending))
        _, still_pending = await asyncio.wait(set(self._pending), timeout=timeout)
        if still_pending:
            LOGGER.warning("%s reply deletions did not finish before shutdown", len(still_pending))
