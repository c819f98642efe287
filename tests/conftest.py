"""Shared test fixtures."""
from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Optional, Union

import pytest

from stream_shared.protocol.frames import Frame

ScriptItem = Union[Frame, None, BaseException]


def make_account(account_id: str = "9", acct: str = "alice@example.social") -> Dict[str, Any]:
    return {
        "id": account_id,
        "username": acct.split("@")[0],
        "acct": acct,
        "display_name": "Alice",
        "url": f"https://example.social/users/{acct.split('@')[0]}",
        "followers_count": 3,
    }


def make_status(status_id: str = "101", content: str = "<p>hello</p>") -> Dict[str, Any]:
    return {
        "id": status_id,
        "uri": f"https://example.social/objects/{status_id}",
        "url": f"https://example.social/notice/{status_id}",
        "account": make_account(),
        "content": content,
        "created_at": "2024-03-01T12:00:00.000Z",
        "visibility": "public",
        "sensitive": False,
        "spoiler_text": "",
        "media_attachments": [],
        "mentions": [],
        "tags": [{"name": "fediverse", "url": "https://example.social/tag/fediverse"}],
        "pleroma": {"local": True},
    }


def make_notification(notification_id: str = "55", kind: str = "mention") -> Dict[str, Any]:
    return {
        "id": notification_id,
        "type": kind,
        "created_at": "2024-03-01T12:01:00.000Z",
        "account": make_account("12", "bob@remote.example"),
        "status": make_status(),
    }


def make_conversation(conversation_id: str = "7") -> Dict[str, Any]:
    return {
        "id": conversation_id,
        "accounts": [make_account()],
        "last_status": make_status(),
        "unread": True,
    }


def envelope_frame(event: str, payload: Any) -> Frame:
    """Text frame carrying `{event, payload}`; dict payloads are JSON-encoded like the server does."""
    if isinstance(payload, dict):
        payload = json.dumps(payload)
    return Frame.text(json.dumps({"event": event, "payload": payload}))


class FakeSocket:
    """Scripted FrameSocket: replays frames, empty reads (None) and raised errors, then hangs."""

    def __init__(
        self,
        script: List[ScriptItem],
        *,
        pong_error: Optional[BaseException] = None,
        close_error: Optional[BaseException] = None,
    ) -> None:
        self._script = list(script)
        self.pong_error = pong_error
        self.close_error = close_error
        self.pongs: List[bytes] = []
        self.close_acknowledged = False
        self.released = False
        self.reads = 0

    async def receive(self) -> Optional[Frame]:
        self.reads += 1
        if not self._script:
            await asyncio.Event().wait()
        item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def pong(self, data: bytes = b"") -> None:
        if self.pong_error is not None:
            raise self.pong_error
        self.pongs.append(data)

    async def close(self) -> None:
        if self.close_error is not None:
            raise self.close_error
        self.close_acknowledged = True

    async def release(self) -> None:
        self.released = True


class FakeConnector:
    """Hands out one scripted outcome (socket or exception) per connection attempt."""

    def __init__(self, *outcomes: Union[FakeSocket, BaseException]) -> None:
        self._outcomes = list(outcomes)
        self.urls: List[str] = []

    async def __call__(self, url: str) -> FakeSocket:
        self.urls.append(url)
        if not self._outcomes:
            raise AssertionError("unexpected connection attempt")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    """Stands in for asyncio.sleep and remembers requested delays."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await asyncio.sleep(0)


class EventCollector:
    def __init__(self) -> None:
        self.events: List[Any] = []

    def __call__(self, event: Any) -> None:
        self.events.append(event)


@pytest.fixture
def collector() -> EventCollector:
    return EventCollector()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()
