from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from stream_shared.entities import Conversation, Notification, Status

from .tags import EventTag


class BaseEvent(BaseModel):
    """Base shape shared by every decoded stream event."""

    model_config = ConfigDict(frozen=True)

    event: EventTag


class HeartbeatEvent(BaseEvent):
    event: Literal[EventTag.HEARTBEAT] = Field(default=EventTag.HEARTBEAT, frozen=True)


class UpdateEvent(BaseEvent):
    event: Literal[EventTag.UPDATE] = Field(default=EventTag.UPDATE, frozen=True)
    status: Status


class NotificationEvent(BaseEvent):
    event: Literal[EventTag.NOTIFICATION] = Field(default=EventTag.NOTIFICATION, frozen=True)
    notification: Notification


class ConversationEvent(BaseEvent):
    event: Literal[EventTag.CONVERSATION] = Field(default=EventTag.CONVERSATION, frozen=True)
    conversation: Conversation


class DeleteEvent(BaseEvent):
    event: Literal[EventTag.DELETE] = Field(default=EventTag.DELETE, frozen=True)
    id: str


Event = Union[HeartbeatEvent, UpdateEvent, NotificationEvent, ConversationEvent, DeleteEvent]

__all__ = [
    "BaseEvent",
    "HeartbeatEvent",
    "UpdateEvent",
    "NotificationEvent",
    "ConversationEvent",
    "DeleteEvent",
    "Event",
]
