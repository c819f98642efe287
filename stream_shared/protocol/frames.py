from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Union

from .constants import ENCODING, NORMAL_CLOSE_CODE


class FrameKind(StrEnum):
    """Websocket frame opcodes the read loop can observe."""

    TEXT = "text"
    BINARY = "binary"
    PING = "ping"
    PONG = "pong"
    CLOSE = "close"


@dataclass(frozen=True)
class Frame:
    """Transport-neutral view of one websocket frame."""

    kind: FrameKind
    data: Union[str, bytes] = b""
    close_code: Optional[int] = None
    close_reason: str = ""

    @classmethod
    def text(cls, data: str) -> "Frame":
        return cls(FrameKind.TEXT, data)

    @classmethod
    def binary(cls, data: bytes) -> "Frame":
        return cls(FrameKind.BINARY, data)

    @classmethod
    def ping(cls, data: bytes = b"") -> "Frame":
        return cls(FrameKind.PING, data)

    @classmethod
    def pong(cls, data: bytes = b"") -> "Frame":
        return cls(FrameKind.PONG, data)

    @classmethod
    def close(cls, code: Optional[int] = None, reason: str = "") -> "Frame":
        return cls(FrameKind.CLOSE, b"", close_code=code, close_reason=reason)

    @property
    def is_heartbeat(self) -> bool:
        return self.kind in (FrameKind.PING, FrameKind.PONG)

    @property
    def is_normal_close(self) -> bool:
        """A close frame without a status code counts as normal."""
        return self.kind is FrameKind.CLOSE and (self.close_code is None or self.close_code == NORMAL_CLOSE_CODE)

    def as_text(self) -> str:
        if isinstance(self.data, bytes):
            return self.data.decode(ENCODING)
        return self.data

    def as_bytes(self) -> bytes:
        if isinstance(self.data, str):
            return self.data.encode(ENCODING)
        return self.data


__all__ = ["Frame", "FrameKind"]
