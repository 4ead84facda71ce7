from __future__ import annotations

import asyncio
import time

from phraseguard.core.ephemeral import EphemeralReplier


def test_reply_is_visible_then_expires(transport, message_factory) -> None:
    command = message_factory("/help@guard_bot", message_id=3)
    replier = EphemeralReplier(transport, cleanup_delay_seconds=0.05)

    async def scenario() -> bool:
        await replier.respond_and_expire(command, "hello")
        chat_id, reply_id, _ = transport.sent[0]
        visible_now = transport.is_visible(chat_id, reply_id)
        await replier.drain()
        return visible_now

    visible_now = asyncio.run(scenario())
    chat_id, reply_id, _ = transport.sent[0]

    assert visible_now
    assert not transport.is_visible(chat_id, reply_id)
    assert (command.chat_id, command.message_id) in transport.deleted
    assert replier.pending == 0


def test_scheduling_does_not_block_caller(transport, message_factory) -> None:
    replier = EphemeralReplier(transport, cleanup_delay_seconds=30)

    async def scenario() -> tuple[float, int]:
        started = time.monotonic()
        await replier.respond_and_expire(message_factory("/help@guard_bot"), "hello")
        return time.monotonic() - started, replier.pending

    elapsed, pending = asyncio.run(scenario())

    assert elapsed < 1
    assert pending == 1


def test_send_failure_schedules_nothing(transport, message_factory) -> None:
    transport.failing.add("send_message")
    replier = EphemeralReplier(transport, cleanup_delay_seconds=0)
    command = message_factory("/help@guard_bot", message_id=9)

    asyncio.run(replier.respond_and_expire(command, "hello"))

    assert replier.pending == 0
    assert transport.deleted == [(command.chat_id, 9)]


def test_command_delete_failure_still_replies(transport, message_factory) -> None:
    transport.failing.add("delete_message")
    replier = EphemeralReplier(transport, cleanup_delay_seconds=0)

    async def scenario() -> None:
        await replier.respond_and_expire(message_factory("/help@guard_bot"), "hello")
        await replier.drain()

    asyncio.run(scenario())

    assert transport.replies() == ["hello"]
    assert replier.pending == 0
