from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional


class CloseCode(IntEnum):
    """Websocket close status codes (RFC 6455 section 7.4.1)."""

    NORMAL = 1000
    GOING_AWAY = 1001
    PROTOCOL_ERROR = 1002
    UNSUPPORTED_DATA = 1003
    NO_STATUS = 1005
    ABNORMAL = 1006
    INVALID_PAYLOAD = 1007
    POLICY_VIOLATION = 1008
    MESSAGE_TOO_BIG = 1009
    MANDATORY_EXTENSION = 1010
    INTERNAL_ERROR = 1011
    SERVICE_RESTART = 1012
    TRY_AGAIN_LATER = 1013


class FailureKind(Enum):
    """Reasons a socket session ends in a retryable state."""

    CONNECTION_FAILURE = "connection error"
    READ_FAILURE = "socket read error"
    READ_TIMEOUT = "timeout error"
    ABNORMAL_CLOSE = "unusual socket close error"


class StreamError(Exception):
    """Base class for every error raised by the streaming client."""

    pass


class ParseError(StreamError):
    """A frame could not be turned into an event. Never fatal to a session."""

    def __init__(self, message: str, *, tag: Optional[str] = None, payload: Optional[str] = None) -> None:
        self.message = message
        self.tag = tag
        self.payload = payload
        super().__init__(message)


class SessionFailure(StreamError):
    """Terminal, retryable outcome of a single socket session."""

    def __init__(self, kind: FailureKind, message: str = "") -> None:
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.value}: {message}" if message else kind.value)


class RetryExhausted(StreamError):
    """The retry policy refused another connection attempt."""

    def __init__(self, attempts: int, last_failure: Optional[FailureKind] = None) -> None:
        self.attempts = attempts
        self.last_failure = last_failure
        reason = last_failure.value if last_failure else "n/a"
        super().__init__(f"Gave up after {attempts} attempts (last failure: {reason})")


class TransportError(StreamError):
    """Transport level error surfaced by the websocket adapter."""

    pass


class HandshakeError(TransportError):
    pass


class TransportReadError(TransportError):
    pass


class TransportSendError(TransportError):
    pass


__all__ = [
    "CloseCode",
    "FailureKind",
    "StreamError",
    "ParseError",
    "SessionFailure",
    "RetryExhausted",
    "TransportError",
    "HandshakeError",
    "TransportReadError",
    "TransportSendError",
]
