from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional, Protocol

import aiohttp

from stream_shared.protocol.errors import HandshakeError, TransportReadError, TransportSendError
from stream_shared.protocol.frames import Frame

from .endpoint import redact_url

logger = logging.getLogger(__name__)

HANDSHAKE_TIMEOUT_SECONDS = 30.0


class FrameSocket(Protocol):
    """What a socket session needs from an open websocket."""

    async def receive(self) -> Optional[Frame]: ...

    async def pong(self, data: bytes = b"") -> None: ...

    async def close(self) -> None: ...

    async def release(self) -> None: ...


Connector = Callable[[str], Awaitable[FrameSocket]]


class WebSocketConnection:
    """aiohttp websocket exposing raw frames, control frames included."""

    def __init__(self, http: aiohttp.ClientSession, ws: aiohttp.ClientWebSocketResponse) -> None:
        self._http = http
        self._ws = ws

    async def receive(self) -> Optional[Frame]:
        try:
            msg = await self._ws.receive()
        except (aiohttp.ClientError, ConnectionError) as exc:
            raise TransportReadError(f"Receive failed: {exc}") from exc
        return self._to_frame(msg)

    @staticmethod
    def _to_frame(msg: aiohttp.WSMessage) -> Optional[Frame]:
        match msg.type:
            case aiohttp.WSMsgType.TEXT:
                return Frame.text(msg.data)
            case aiohttp.WSMsgType.BINARY:
                return Frame.binary(msg.data)
            case aiohttp.WSMsgType.PING:
                return Frame.ping(msg.data or b"")
            case aiohttp.WSMsgType.PONG:
                return Frame.pong(msg.data or b"")
            case aiohttp.WSMsgType.CLOSE:
                # aiohttp reports a close frame without a status code as code 0
                return Frame.close(msg.data or None, msg.extra or "")
            case aiohttp.WSMsgType.ERROR:
                raise TransportReadError(f"Websocket error: {msg.data}")
            case aiohttp.WSMsgType.CLOSED:
                raise TransportReadError("Websocket connection is closed")
            case _:
                return None

    async def pong(self, data: bytes = b"") -> None:
        try:
            await self._ws.pong(data)
        except (aiohttp.ClientError, ConnectionError, RuntimeError) as exc:
            raise TransportSendError(f"Pong failed: {exc}") from exc

    async def close(self) -> None:
        try:
            await self._ws.close()
        except (aiohttp.ClientError, ConnectionError, RuntimeError, asyncio.TimeoutError) as exc:
            raise TransportSendError(f"Close failed: {exc}") from exc

    async def release(self) -> None:
        try:
            if not self._ws.closed:
                await self._ws.close()
        except (aiohttp.ClientError, ConnectionError, RuntimeError, asyncio.TimeoutError) as exc:
            logger.debug("Ignoring error while closing websocket: %s", exc)
        finally:
            await self._http.close()


async def _log_handshake_response(
    session: aiohttp.ClientSession,
    ctx: object,
    params: aiohttp.TraceRequestEndParams,
) -> None:
    logger.debug("Response HTTP code: %s", params.response.status)
    logger.debug("Response contains the following headers:")
    for header in params.response.headers:
        logger.debug("* %s", header)


async def connect(url: str, *, handshake_timeout: float = HANDSHAKE_TIMEOUT_SECONDS) -> WebSocketConnection:
    """Open a websocket to `url`. Every failure is reported as HandshakeError."""
    trace = aiohttp.TraceConfig()
    trace.on_request_end.append(_log_handshake_response)
    http = aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=None, connect=handshake_timeout),
        trace_configs=[trace],
    )
    try:
        ws = await http.ws_connect(url, autoping=False, autoclose=False)
    except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as exc:
        await http.close()
        raise HandshakeError(f"Failed to connect to {redact_url(url)}: {exc}") from exc
    except BaseException:
        await http.close()
        raise
    logger.debug("Connected to %s", redact_url(url))
    return WebSocketConnection(http, ws)


__all__ = [
    "FrameSocket",
    "Connector",
    "WebSocketConnection",
    "connect",
    "HANDSHAKE_TIMEOUT_SECONDS",
]
