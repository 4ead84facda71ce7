"""Operator command handling.

Authorization is checked against the transport on every call. Validation
problems become reply text for the operator, never log errors.
"""

from __future__ import annotations

import logging

from phraseguard.core.commands import HELP_TEXT, render_phrase_list
from phraseguard.core.config import DEFAULT_MIN_PHRASE_BYTES
from phraseguard.core.ephemeral import EphemeralReplier
from phraseguard.core.models import (
    AddPhrase,
    AdminCommand,
    IncomingMessage,
    ListPhrases,
    RemovePhrase,
    ShowHelp,
)
from phraseguard.core.phrase_store import PHRASE_SEPARATOR, PhraseStore
from phraseguard.core.ports import ChatTransport

LOGGER = logging.getLogger(__name__)

EMPTY_INPUT = "Input is empty."


class AdminCommandProcessor:
    """Authorizes operators and applies their commands to the phrase store."""

    def __init__(
        self,
        store: PhraseStore,
        transport: ChatTransport,
        replier: EphemeralReplier,
        min_phrase_bytes: int = DEFAULT_MIN_PHRASE_BYTES,
    ) -> None:
        self._store = store
        self._transport = transport
        self._replier = replier
        self._min_phrase_bytes = min_phrase_bytes

    async def is_authorized(self, message: IncomingMessage) -> bool:
        if message.author_id is None:
            return False
        try:
            return await self._transport.is_privileged(message.chat_id, message.author_id)
        except Exception as exc:
            LOGGER.warning(
                "Privilege lookup failed for user %s in chat %s: %s",
                message.author_id,
                message.chat_id,
                exc,
            )
            return False

    async def handle(self, message: IncomingMessage, command: AdminCommand) -> bool:
        """Run an addressed command; return False if the author lacks rights."""

        if not await self.is_authorized(message):
            return False
        LOGGER.info("User %s issued %s in chat %s", message.author_id, type(command).__name__, message.chat_id)
        response = await self.execute(command)
        await self._replier.respond_and_expire(message, response)
        return True

    async def execute(self, command: AdminCommand) -> str:
        """Apply one command and return the response text."""

        if isinstance(command, AddPhrase):
            return await self._add(command.phrase)
        if isinstance(command, RemovePhrase):
            return await self._remove(command.phrase)
        if isinstance(command, ListPhrases):
            return render_phrase_list(self._store.snapshot())
        if isinstance(command, ShowHelp):
            return HELP_TEXT
        raise TypeError(f"Unsupported command: {command!r}")

    async def _add(self, raw: str) -> str:
        phrase = raw.strip()
        if not phrase:
            return EMPTY_INPUT
        if len(phrase.encode("utf-8")) < self._min_phrase_bytes:
            return f"Phrase is too short: at least {self._min_phrase_bytes} bytes are required."
        if PHRASE_SEPARATOR in phrase:
            return f"Phrase must not contain \"{PHRASE_SEPARATOR}\"."
        if await self._store.add(phrase):
            return f"Added phrase: {phrase}"
        return f"Phrase is already in the list: {phrase}"

    async def _remove(self, raw: str) -> str:
        phrase = raw.strip()
        if await self._store.remove(phrase):
            return f"Removed phrase: {phrase}"
        return f"Phrase not found: {phrase}\nUse /print to see the current list."
