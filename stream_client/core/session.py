from __future__ import annotations

import asyncio
import logging
from typing import Optional

from stream_shared.protocol.constants import READ_TIMEOUT_SECONDS
from stream_shared.protocol.decoder import decode
from stream_shared.protocol.errors import (
    CloseCode,
    FailureKind,
    ParseError,
    SessionFailure,
    TransportError,
    TransportReadError,
    TransportSendError,
)
from stream_shared.protocol.frames import Frame, FrameKind

from . import transport
from .base import EventSink, deliver
from .endpoint import redact_url
from .transport import Connector, FrameSocket

logger = logging.getLogger(__name__)


class SocketSession:
    """
    One physical connection attempt: handshake, read loop, heartbeat reply and close
    handling.

    `run()` returns when the server closes with the normal status code and raises
    SessionFailure for every retryable ending.
    """

    def __init__(
        self,
        url: str,
        sink: EventSink,
        *,
        connect: Optional[Connector] = None,
        read_timeout: float = READ_TIMEOUT_SECONDS,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.url = url
        self.sink = sink
        self.read_timeout = read_timeout
        self.log = log or logger
        self._connect: Connector = connect or transport.connect
        self._safe_url = redact_url(url)

        self.events_delivered: int = 0
        self.parse_failures: int = 0

    async def run(self) -> None:
        self.log.debug("Connecting to %s", self._safe_url)
        try:
            socket = await self._connect(self.url)
        except TransportError as exc:
            self.log.error("Failed to connect: %s", exc)
            raise SessionFailure(FailureKind.CONNECTION_FAILURE, str(exc)) from exc

        self.log.debug("Connected to %s", self._safe_url)
        try:
            await self._read_loop(socket)
        finally:
            await socket.release()

    async def _read_loop(self, socket: FrameSocket) -> None:
        while True:
            try:
                frame = await asyncio.wait_for(socket.receive(), timeout=self.read_timeout)
            except asyncio.TimeoutError as exc:
                self.log.error("Timeout reading message: no frame within %ss", self.read_timeout)
                raise SessionFailure(FailureKind.READ_TIMEOUT, f"no frame within {self.read_timeout}s") from exc
            except TransportReadError as exc:
                self.log.error("Failed to read message: %s", exc)
                raise SessionFailure(FailureKind.READ_FAILURE, str(exc)) from exc

            if frame is None:
                self.log.warning("Response is empty")
                continue

            if frame.kind is FrameKind.PING:
                await self._send_pong(socket, frame)

            if frame.kind is FrameKind.CLOSE:
                await self._acknowledge_close(socket)
                self._finish_on_close(frame)
                return

            await self._handle_frame(frame)

    async def _send_pong(self, socket: FrameSocket, frame: Frame) -> None:
        self.log.debug("Received ping, sending pong")
        try:
            await socket.pong(frame.as_bytes())
        except TransportSendError as exc:
            self.log.error("Pong failed: %s", exc)

    async def _acknowledge_close(self, socket: FrameSocket) -> None:
        try:
            await socket.close()
        except TransportSendError as exc:
            self.log.error("Close acknowledgement failed: %s", exc)

    def _finish_on_close(self, frame: Frame) -> None:
        if frame.close_code is None:
            self.log.info("Connection to %s is closed without a status code", self._safe_url)
            return
        self.log.warning(
            "Connection to %s is closed because %s %s",
            self._safe_url,
            _describe_close_code(frame.close_code),
            frame.close_reason,
        )
        if not frame.is_normal_close:
            raise SessionFailure(FailureKind.ABNORMAL_CLOSE, f"close code {frame.close_code}")

    async def _handle_frame(self, frame: Frame) -> None:
        try:
            event = decode(frame, self.log)
        except ParseError as exc:
            self.parse_failures += 1
            self.log.warning("%s (tag=%s, payload=%s)", exc, exc.tag, exc.payload)
            return

        self.log.debug("Decoded %s event", event.event.value)
        try:
            await deliver(self.sink, event)
        except Exception as exc:
            self.log.exception("Sink error for %s event: %s", event.event.value, exc)
            return
        self.events_delivered += 1


def _describe_close_code(code: int) -> str:
    try:
        return f"{code} ({CloseCode(code).name})"
    except ValueError:
        return str(code)


__all__ = ["SocketSession"]
