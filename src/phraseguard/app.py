"""Application entry point for the phraseguard bot."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from telethon import events

from phraseguard import settings
from phraseguard.adapters.env_export import export_phrases
from phraseguard.adapters.telegram_mapper import build_message
from phraseguard.adapters.telegram_transport import TelethonTransport
from phraseguard.client import bot_token, build_client
from phraseguard.core.admin import AdminCommandProcessor
from phraseguard.core.commands import render_phrase_list
from phraseguard.core.ephemeral import EphemeralReplier
from phraseguard.core.moderation import ModerationExecutor
from phraseguard.core.phrase_store import PhraseStore
from phraseguard.core.router import UpdateRouter

NAME = "PHRASEGUARD"
FONT = "tarty-1"

DEFAULT_REDACT = ["BOT_TOKEN", "API_HASH"]


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", True):
        return []
    values = []
    for name in redact_cfg.get("patterns", DEFAULT_REDACT):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", True):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    secrets = _collect_redaction_values(config)
    formatter = _RedactingFormatter(secrets, fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/phraseguard.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


async def _shutdown(client, store: PhraseStore, replier: EphemeralReplier) -> None:
    """Let pending reply deletions finish, disconnect, then export the phrase list.

    The drain must run while the client is still connected, otherwise every
    pending deletion fails and the replies stay visible.
    """

    logger = logging.getLogger(__name__)
    await replier.drain(timeout=settings.SHUTDOWN_DRAIN_SECONDS)
    if client.is_connected():
        await client.disconnect()
    snapshot = store.snapshot()
    if settings.EXPORT_PATH:
        export_phrases(settings.EXPORT_PATH, settings.PHRASES_ENV, snapshot)
    else:
        logger.info("No export file configured; final phrases: %s", ":".join(sorted(snapshot)))


def _run() -> None:
    _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    logger.info("Starting phraseguard")

    # The store is owned here and handed to every component that needs it.
    store = PhraseStore(settings.initial_phrases())
    logger.info("%s phrases are loaded", len(store))

    client = build_client()
    client.start(bot_token=bot_token())
    me = client.loop.run_until_complete(client.get_me())
    bot_username = settings.BOT_USERNAME or me.username
    if not bot_username:
        raise RuntimeError("Bot has no username; set BOT_USERNAME")
    logger.info("Logged in as @%s", bot_username)

    moderation = settings.MODERATION
    transport = TelethonTransport(client)
    replier = EphemeralReplier(transport, moderation.cleanup_delay_seconds)
    admin = AdminCommandProcessor(store, transport, replier, moderation.min_phrase_bytes)
    executor = ModerationExecutor(transport, moderation.revoke_messages)
    router = UpdateRouter(store, admin, executor, bot_username)

    # Telethon schedules each update as its own task, so one slow transport
    # call never holds up the next message.
    @client.on(events.NewMessage(incoming=True))
    async def on_new_message(event) -> None:
        try:
            await router.handle(build_message(event.message))
        except Exception:
            logger.exception("Error while processing message")

    @client.on(events.MessageEdited(incoming=True))
    async def on_edited_message(event) -> None:
        try:
            await router.handle(build_message(event.message, edited=True))
        except Exception:
            logger.exception("Error while processing edited message")

    logger.info("Client connected. Listening for messages...")
    # run_until_disconnected would disconnect on Ctrl+C before the drain, so
    # the loop is driven here and shutdown owns the disconnect.
    try:
        client.loop.run_until_complete(client.disconnected)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        client.loop.run_until_complete(_shutdown(client, store, replier))


def _print_phrases() -> None:
    _configure_logging()
    print(render_phrase_list(frozenset(settings.initial_phrases())))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="phraseguard")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Start the moderation bot")
    subparsers.add_parser(
        "phrases",
        help="Print the startup phrase list resolved from the environment.",
    )

    args = parser.parse_args(argv)
    if args.command == "phrases":
        _print_phrases()
        return
    _run()


if __name__ == "__main__":
    main()
