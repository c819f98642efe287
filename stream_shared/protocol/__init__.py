"""
Shared protocol package that centralizes event tags, frame and envelope models,
decoding and the error taxonomy of the streaming API.
"""

from .constants import ENCODING, NORMAL_CLOSE_CODE, READ_TIMEOUT_SECONDS, RECONNECT_INTERVAL_SECONDS
from .decoder import decode, dispatch
from .envelope import Envelope
from .errors import (
    CloseCode,
    FailureKind,
    HandshakeError,
    ParseError,
    RetryExhausted,
    SessionFailure,
    StreamError,
    TransportError,
    TransportReadError,
    TransportSendError,
)
from .events import (
    BaseEvent,
    ConversationEvent,
    DeleteEvent,
    Event,
    HeartbeatEvent,
    NotificationEvent,
    UpdateEvent,
)
from .frames import Frame, FrameKind
from .tags import EventTag, WIRE_TAGS, is_wire_tag

__all__ = [
    "ENCODING",
    "NORMAL_CLOSE_CODE",
    "READ_TIMEOUT_SECONDS",
    "RECONNECT_INTERVAL_SECONDS",
    "decode",
    "dispatch",
    "Envelope",
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
    "BaseEvent",
    "Event",
    "HeartbeatEvent",
    "UpdateEvent",
    "NotificationEvent",
    "ConversationEvent",
    "DeleteEvent",
    "Frame",
    "FrameKind",
    "EventTag",
    "WIRE_TAGS",
    "is_wire_tag",
]
