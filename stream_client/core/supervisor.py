from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional

from stream_shared.protocol.constants import READ_TIMEOUT_SECONDS
from stream_shared.protocol.errors import FailureKind, RetryExhausted, SessionFailure, StreamError

from .base import EventSink, Streaming
from .endpoint import EndpointConfig, redact_url
from .retry import FixedIntervalPolicy, RetryPolicy
from .session import SocketSession
from .transport import Connector

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class ConnectionSupervisor(Streaming):
    """Keeps one stream alive: runs socket sessions back to back until a clean close."""

    def __init__(
        self,
        endpoint: EndpointConfig,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        connect: Optional[Connector] = None,
        read_timeout: float = READ_TIMEOUT_SECONDS,
        sleep: Sleeper = asyncio.sleep,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.endpoint = endpoint
        self.retry_policy = retry_policy or FixedIntervalPolicy()
        self.read_timeout = read_timeout
        self.log = log or logger
        self._connect = connect
        self._sleep = sleep
        self._listening = False
        self.sessions_started: int = 0

    @property
    def listening(self) -> bool:
        return self._listening

    def _new_session(self, url: str, sink: EventSink) -> SocketSession:
        return SocketSession(url, sink, connect=self._connect, read_timeout=self.read_timeout, log=self.log)

    async def listen(self, sink: EventSink) -> None:
        if self._listening:
            raise StreamError("Supervisor is already listening; create one supervisor per stream")
        self._listening = True
        try:
            await self._supervise(sink)
        finally:
            self._listening = False

    async def _supervise(self, sink: EventSink) -> None:
        url = self.endpoint.build_url()
        safe_url = redact_url(url)
        attempt = 0
        while True:
            self.sessions_started += 1
            try:
                await self._new_session(url, sink).run()
            except SessionFailure as exc:
                # failures after a completed handshake start a fresh count
                attempt = attempt + 1 if exc.kind is FailureKind.CONNECTION_FAILURE else 1
                delay = self.retry_policy.next_delay(attempt)
                if delay is None:
                    self.log.error("Giving up on %s after %d attempts (%s)", safe_url, attempt, exc.kind.value)
                    raise RetryExhausted(attempt, exc.kind) from exc
                self.log.info("Session for %s ended with %s; retrying in %.1fs", safe_url, exc.kind.value, delay)
                await self._sleep(delay)
                self.log.info("Reconnecting to %s", safe_url)
                continue
            self.log.info("Connection for %s is closed", safe_url)
            return


async def listen(endpoint: EndpointConfig, sink: EventSink, **options) -> None:
    """Listen to `endpoint` until the server closes the stream normally."""
    await ConnectionSupervisor(endpoint, **options).listen(sink)


__all__ = ["ConnectionSupervisor", "Sleeper", "listen"]
