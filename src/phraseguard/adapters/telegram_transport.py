"""Telethon chat transport adapter.

Implements the core ChatTransport port on top of a bot-authorized
TelegramClient. Errors propagate to the core, which logs them.
"""

from __future__ import annotations

import logging

from telethon import TelegramClient, errors, functions

LOGGER = logging.getLogger(__name__)


class TelethonTransport:
    """ChatTransport backed by Telethon."""

    def __init__(self, client: TelegramClient) -> None:
        self._client = client

    async def delete_message(self, chat_id: int, message_id: int) -> None:
        await self._client.delete_messages(chat_id, [message_id])

    async def send_message(self, chat_id: int, text: str) -> int:
        sent = await self._client.send_message(chat_id, text, link_preview=False)
        return sent.id

    async def is_privileged(self, chat_id: int, user_id: int) -> bool:
        permissions = await self._client.get_permissions(chat_id, user_id)
        return bool(permissions.is_admin or permissions.is_creator)

    async def ban_member(self, chat_id: int, user_id: int, revoke_messages: bool) -> None:
        await self._client.edit_permissions(chat_id, user_id, view_messages=False)
        if not revoke_messages:
            return
        # History removal only exists for supergroups; basic groups keep it.
        try:
            await self._client(
                functions.channels.DeleteParticipantHistoryRequest(
                    channel=chat_id,
                    participant=user_id,
                )
            )
        except (errors.RPCError, TypeError, ValueError) as exc:
            LOGGER.warning("Could not revoke messages of user %s in chat %s: %s", user_id, chat_id, exc)
