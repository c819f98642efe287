"""Protocol-wide constants for the streaming API."""

ENCODING = "utf-8"
READ_TIMEOUT_SECONDS = 60.0
RECONNECT_INTERVAL_SECONDS = 5.0
NORMAL_CLOSE_CODE = 1000
STREAM_PARAM = "stream"
ACCESS_TOKEN_PARAM = "access_token"

__all__ = [
    "ENCODING",
    "READ_TIMEOUT_SECONDS",
    "RECONNECT_INTERVAL_SECONDS",
    "NORMAL_CLOSE_CODE",
    "STREAM_PARAM",
    "ACCESS_TOKEN_PARAM",
]
