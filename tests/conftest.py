from __future__ import annotations

from typing import Optional

import pytest

from phraseguard.core.models import IncomingMessage


class FakeTransport:
    """In-memory ChatTransport that records every call."""

    def __init__(self) -> None:
        self.admins: set[tuple[int, int]] = set()
        self.failing: set[str] = set()
        self.deleted: list[tuple[int, int]] = []
        self.sent: list[tuple[int, int, str]] = []
        self.banned: list[tuple[int, int, bool]] = []
        self.privilege_checks = 0
        self._next_id = 1000

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise RuntimeError(f"{operation} failed")

    async def delete_message(self, chat_id: int, message_id: int) -> None:
        self._maybe_fail("delete_message")
        self.deleted.append((chat_id, message_id))

    async def send_message(self, chat_id: int, text: str) -> int:
        self._maybe_fail("send_message")
        self._next_id += 1
        self.sent.append((chat_id, self._next_id, text))
        return self._next_id

    async def is_privileged(self, chat_id: int, user_id: int) -> bool:
        self.privilege_checks += 1
        self._maybe_fail("is_privileged")
        return (chat_id, user_id) in self.admins

    async def ban_member(self, chat_id: int, user_id: int, revoke_messages: bool) -> None:
        self._maybe_fail("ban_member")
        self.banned.append((chat_id, user_id, revoke_messages))

    def is_visible(self, chat_id: int, message_id: int) -> bool:
        was_sent = any(chat == chat_id and mid == message_id for chat, mid, _ in self.sent)
        return was_sent and (chat_id, message_id) not in self.deleted

    def replies(self) -> list[str]:
        return [text for _, _, text in self.sent]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


def make_message(
    text: Optional[str],
    *,
    chat_id: int = -100500,
    message_id: int = 1,
    author_id: Optional[int] = 42,
    edited: bool = False,
    from_bot: bool = False,
) -> IncomingMessage:
    return IncomingMessage(
        chat_id=chat_id,
        message_id=message_id,
        author_id=author_id,
        text=text,
        edited=edited,
        from_bot=from_bot,
    )


@pytest.fixture
def message_factory():
    return make_message
