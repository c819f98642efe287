from __future__ import annotations

from enum import StrEnum
from typing import FrozenSet


class EventTag(StrEnum):
    """
    Canonical event names of the streaming API.
    HEARTBEAT never appears on the wire; it labels ping/pong frames.
    """

    HEARTBEAT = "heartbeat"
    UPDATE = "update"
    NOTIFICATION = "notification"
    CONVERSATION = "conversation"
    DELETE = "delete"


WIRE_TAGS: FrozenSet[str] = frozenset(
    {
        EventTag.UPDATE.value,
        EventTag.NOTIFICATION.value,
        EventTag.CONVERSATION.value,
        EventTag.DELETE.value,
    }
)


def is_wire_tag(value: str) -> bool:
    """Check if `value` is a tag the server may send in an envelope."""
    return value in WIRE_TAGS


__all__ = ["EventTag", "WIRE_TAGS", "is_wire_tag"]
