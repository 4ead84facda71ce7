"""Best-effort export of the phrase list to a shell env file.

The file holds ``export KEY="value"`` lines. Only the line for the phrase
variable is rewritten; every other line is kept verbatim. On any failure the
phrases are logged so an operator can restore them by hand.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from phraseguard.core.phrase_store import PHRASE_SEPARATOR

LOGGER = logging.getLogger(__name__)


def _quote(value: str) -> str:
    for ch in ("\\", '"', "$", "`"):
        value = value.replace(ch, f"\\{ch}")
    return f'"{value}"'


def format_export_line(key: str, phrases: Iterable[str]) -> str:
    return f"export {key}={_quote(PHRASE_SEPARATOR.join(sorted(phrases)))}"


def rewrite_export_lines(lines: List[str], key: str, phrases: Iterable[str]) -> List[str]:
    """Replace the first ``export KEY=`` line, appending one if missing."""

    new_line = format_export_line(key, phrases)
    prefix = f"export {key}="
    result = list(lines)
    for index, line in enumerate(result):
        if line.strip().startswith(prefix):
            result[index] = new_line
            return result
    result.append(new_line)
    return result


def export_phrases(path: str, key: str, phrases: Iterable[str]) -> bool:
    """Rewrite the phrase line in ``path``; return False if it was skipped."""

    phrases = sorted(phrases)
    # A phrase holding the separator would come back split into pieces.
    unsafe = [phrase for phrase in phrases if PHRASE_SEPARATOR in phrase]
    if unsafe:
        LOGGER.error("Not exporting phrases containing %r: %s", PHRASE_SEPARATOR, unsafe)
        phrases = [phrase for phrase in phrases if PHRASE_SEPARATOR not in phrase]
    try:
        with open(path, "r", encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        LOGGER.error("Cannot read export file %s (%s); skipping export", path, exc)
        LOGGER.error("Current phrases: %s", PHRASE_SEPARATOR.join(phrases))
        return False

    updated = rewrite_export_lines(lines, key, phrases)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(updated) + "\n")
    except OSError as exc:
        LOGGER.error("Failed to write export file %s (%s)", path, exc)
        LOGGER.error("Phrases that were not saved: %s", PHRASE_SEPARATOR.join(phrases))
        return False

    LOGGER.info("Exported %s phrases to %s", len(phrases), path)
    return True
