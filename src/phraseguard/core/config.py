"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CLEANUP_DELAY_SECONDS = 30.0
DEFAULT_MIN_PHRASE_BYTES = 3
DEFAULT_PLACEHOLDER_PHRASE = "phraseguard-placeholder"


@dataclass(frozen=True)
class ModerationConfig:
    """Moderation settings consumed by the core components."""

    cleanup_delay_seconds: float = DEFAULT_CLEANUP_DELAY_SECONDS
    min_phrase_bytes: int = DEFAULT_MIN_PHRASE_BYTES
    revoke_messages: bool = True
    placeholder_phrase: str = DEFAULT_PLACEHOLDER_PHRASE
