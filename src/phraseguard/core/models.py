"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class IncomingMessage:
    """Minimal message view used by the router and moderation pipeline."""

    chat_id: int
    message_id: int
    author_id: Optional[int]
    text: Optional[str]
    edited: bool = False
    from_bot: bool = False


@dataclass(frozen=True)
class AddPhrase:
    phrase: str


@dataclass(frozen=True)
class RemovePhrase:
    phrase: str


@dataclass(frozen=True)
class ListPhrases:
    pass


@dataclass(frozen=True)
class ShowHelp:
    pass


AdminCommand = Union[AddPhrase, RemovePhrase, ListPhrases, ShowHelp]
