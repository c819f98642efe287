from .base import EventSink, Streaming
from .endpoint import EndpointConfig, redact_url
from .retry import ExponentialBackoffPolicy, FixedIntervalPolicy, RetryPolicy
from .session import SocketSession
from .supervisor import ConnectionSupervisor, listen
from .transport import WebSocketConnection, connect

__all__ = [
    "EventSink",
    "Streaming",
    "EndpointConfig",
    "redact_url",
    "RetryPolicy",
    "FixedIntervalPolicy",
    "ExponentialBackoffPolicy",
    "SocketSession",
    "ConnectionSupervisor",
    "listen",
    "WebSocketConnection",
    "connect",
]
