"""phraseguard: phrase-based spam moderation for Telegram groups."""

__version__ = "0.1.0"
