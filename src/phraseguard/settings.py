"""Static configuration for phraseguard.

Secrets and the initial phrase list come from the environment (optionally a
.env file). Tunables such as logging and the reply cleanup delay live in an
optional config.json at the project root.
"""

import json
import logging
import os

from dotenv import load_dotenv

from phraseguard.core.config import (
    DEFAULT_CLEANUP_DELAY_SECONDS,
    DEFAULT_MIN_PHRASE_BYTES,
    DEFAULT_PLACEHOLDER_PHRASE,
    ModerationConfig,
)
from phraseguard.core.phrase_store import parse_phrase_list

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

CONFIG_PATH = os.getenv("PHRASEGUARD_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))

# Environment variable holding the colon-delimited phrase list.
PHRASES_ENV = "SPAM_PHRASES"


def _load_json_config() -> dict:
    """Load config.json if present; every section is optional."""

    if not os.path.exists(CONFIG_PATH):
        return {}

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

CONFIG = _CONFIG

_moderation = _CONFIG.get("moderation", {})
MODERATION = ModerationConfig(
    cleanup_delay_seconds=float(_moderation.get("cleanup_delay_seconds", DEFAULT_CLEANUP_DELAY_SECONDS)),
    min_phrase_bytes=int(_moderation.get("min_phrase_bytes", DEFAULT_MIN_PHRASE_BYTES)),
    revoke_messages=bool(_moderation.get("revoke_messages", True)),
    placeholder_phrase=_moderation.get("placeholder_phrase", DEFAULT_PLACEHOLDER_PHRASE),
)

# Shutdown export target; unset disables the export.
_export = _CONFIG.get("export", {})
EXPORT_PATH = os.getenv("PHRASES_EXPORT_FILE") or _export.get("path")

# Upper bound on how long shutdown waits for pending reply deletions.
SHUTDOWN_DRAIN_SECONDS = float(_CONFIG.get("shutdown_drain_seconds", MODERATION.cleanup_delay_seconds + 5))

# Optional override for the handle commands must mention.
BOT_USERNAME = os.getenv("BOT_USERNAME")

LOGGING = _CONFIG.get("logging", {})


def initial_phrases() -> list[str]:
    """Resolve the startup phrase list, falling back to a placeholder."""

    logger = logging.getLogger(__name__)
    raw = os.getenv(PHRASES_ENV)
    if raw is None:
        logger.warning(
            "%s is not set; starting with placeholder phrase %r",
            PHRASES_ENV,
            MODERATION.placeholder_phrase,
        )
        return [MODERATION.placeholder_phrase]

    phrases = []
    for phrase in parse_phrase_list(raw):
        if len(phrase.encode("utf-8")) < MODERATION.min_phrase_bytes:
            logger.warning("Skipping phrase %r from %s: too short", phrase, PHRASES_ENV)
            continue
        phrases.append(phrase)
    return phrases
