"""Phrase matching logic (core domain)."""

from __future__ import annotations

from typing import AbstractSet, List, Optional


def is_flagged(text: Optional[str], snapshot: AbstractSet[str]) -> bool:
    """Return True when any phrase occurs in text as an exact substring.

    Matching is case-sensitive and applies no tokenization or normalization.
    """

    if not text:
        return False
    return any(phrase in text for phrase in snapshot)


def find_matches(text: Optional[str], snapshot: AbstractSet[str]) -> List[str]:
    """Return the sorted phrases found in text, for logging."""

    if not text:
        return []
    return sorted(phrase for phrase in snapshot if phrase in text)
