"""Shared phrase database (core domain).

Readers take a snapshot, which is just the currently published frozenset and
never waits. Writers are serialized by a lock and publish a new frozenset by
swapping the reference, so a reader sees either the old or the new set.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

LOGGER = logging.getLogger(__name__)

# Separator of the env/export phrase list; phrases may not contain it.
PHRASE_SEPARATOR = ":"


def parse_phrase_list(raw: Optional[str]) -> List[str]:
    """Split a colon-delimited phrase list, dropping empty entries."""

    if not raw:
        return []
    phrases = []
    for part in raw.split(PHRASE_SEPARATOR):
        phrase = part.strip()
        if phrase:
            phrases.append(phrase)
    return phrases


class PhraseStore:
    """Multiple-reader/single-writer set of blocked phrases."""

    def __init__(self, phrases: Iterable[str] = ()) -> None:
        self._phrases: frozenset[str] = frozenset(phrases)
        self._write_lock = asyncio.Lock()

    def snapshot(self) -> frozenset[str]:
        return self._phrases

    def __len__(self) -> int:
        return len(self._phrases)

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._phrases

    async def add(self, phrase: str) -> bool:
        """Insert a phrase; return False when it was already present."""

        async with self._write_lock:
            current = self._phrases
            if phrase in current:
                return False
            self._phrases = current | {phrase}
        LOGGER.info("Phrase added (%s total)", len(self._phrases))
        return True

    async def remove(self, phrase: str) -> bool:
        """Remove a phrase; return False when it was not present."""

        async with self._write_lock:
            current = self._phrases
            if phrase not in current:
                return False
            self._phrases = current - {phrase}
        LOGGER.info("Phrase removed (%s total)", len(self._phrases))
        return True
