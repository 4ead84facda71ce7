"""Inbound update routing.

Each message is classified once into a route: an addressed operator command,
a message to screen, or nothing to do. Edits are screened like new messages
because an edit can introduce text the original lacked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from phraseguard.core.admin import AdminCommandProcessor
from phraseguard.core.classifier import find_matches, is_flagged
from phraseguard.core.commands import parse_command
from phraseguard.core.models import AdminCommand, IncomingMessage
from phraseguard.core.moderation import ModerationExecutor
from phraseguard.core.phrase_store import PhraseStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandRoute:
    command: AdminCommand


@dataclass(frozen=True)
class ScreenRoute:
    pass


@dataclass(frozen=True)
class IgnoreRoute:
    reason: str


Route = Union[CommandRoute, ScreenRoute, IgnoreRoute]


def route_for(message: IncomingMessage, bot_username: str) -> Route:
    """Decide which path a message takes, without touching the transport."""

    if message.from_bot:
        return IgnoreRoute("sent by a bot")
    if not message.text:
        return IgnoreRoute("no text")
    if not message.edited:
        command = parse_command(message.text, bot_username)
        if command is not None:
            return CommandRoute(command)
    return ScreenRoute()


class UpdateRouter:
    """Dispatches messages to the command processor or the moderation path."""

    def __init__(
        self,
        store: PhraseStore,
        admin: AdminCommandProcessor,
        executor: ModerationExecutor,
        bot_username: str,
    ) -> None:
        self._store = store
        self._admin = admin
        self._executor = executor
        self._bot_username = bot_username

    async def handle(self, message: IncomingMessage) -> None:
        route = route_for(message, self._bot_username)
        if isinstance(route, IgnoreRoute):
            return
        if isinstance(route, CommandRoute):
            if await self._admin.handle(message, route.command):
                return
            # Commands from non-operators are ordinary messages.
        await self.screen(message)

    async def screen(self, message: IncomingMessage) -> None:
        snapshot = self._store.snapshot()
        if not is_flagged(message.text, snapshot):
            return
        LOGGER.info(
            "Flagged %s message %s in chat %s (phrases: %s)",
            "edited" if message.edited else "new",
            message.message_id,
            message.chat_id,
            ", ".join(find_matches(message.text, snapshot)),
        )
        await self._executor.execute(message)
