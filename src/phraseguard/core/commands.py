"""Operator command parsing and rendering (core domain).

Commands look like ``/add@phraseguard_bot some phrase``. A command only counts
when it names this bot, either attached to the command token or as a
standalone ``@handle`` at the start or end of the arguments. Anything else is
not a command for us and parses to None.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Optional

from phraseguard.core.models import AddPhrase, AdminCommand, ListPhrases, RemovePhrase, ShowHelp

HELP_TEXT = "\n".join(
    [
        "Available commands:",
        "/add <phrase> - add a phrase to the block list",
        "/remove <phrase> - remove a phrase from the block list",
        "/print - show all blocked phrases",
        "/help - show this message",
    ]
)


def _strip_mention(args: str, handle: str) -> Optional[str]:
    """Remove a standalone @handle at either end of args, or return None."""

    mention = re.escape(f"@{handle}")
    leading = re.compile(rf"^{mention}(?:\s+|$)", re.IGNORECASE)
    trailing = re.compile(rf"(?:^|\s+){mention}$", re.IGNORECASE)
    stripped = args.strip()
    if leading.search(stripped):
        return leading.sub("", stripped, count=1)
    if trailing.search(stripped):
        return trailing.sub("", stripped, count=1)
    return None


def parse_command(text: Optional[str], bot_username: str) -> Optional[AdminCommand]:
    """Parse an operator command addressed to ``bot_username``."""

    if not text or not bot_username:
        return None
    stripped = text.strip()
    if not stripped.startswith("/"):
        return None

    parts = stripped.split(maxsplit=1)
    token = parts[0][1:]
    args = parts[1] if len(parts) > 1 else ""
    name, _, target = token.partition("@")
    handle = bot_username.lstrip("@").lower()

    if target:
        if target.lower() != handle:
            return None
    else:
        args = _strip_mention(args, handle)
        if args is None:
            return None

    name = name.lower()
    if name == "add":
        return AddPhrase(args)
    if name == "remove":
        return RemovePhrase(args)
    # Argument-less commands reject trailing input as malformed.
    if args.strip():
        return None
    if name == "print":
        return ListPhrases()
    if name == "help":
        return ShowHelp()
    return None


def render_phrase_list(snapshot: AbstractSet[str]) -> str:
    """Render a 1-indexed phrase listing, one phrase per line."""

    if not snapshot:
        return "The phrase list is empty."
    return "\n".join(f"{index}. {phrase}" for index, phrase in enumerate(sorted(snapshot), start=1))
