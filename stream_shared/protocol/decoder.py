"""
Two-phase frame decoding.

The envelope is parsed first with the payload kept as a raw string. Only then is the
payload decoded according to the tag, so a malformed entity can still be attributed to
the kind of event it belonged to.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from stream_shared.entities import Conversation, Notification, Status

from .envelope import Envelope
from .errors import ParseError
from .events import ConversationEvent, DeleteEvent, Event, HeartbeatEvent, NotificationEvent, UpdateEvent
from .frames import Frame, FrameKind
from .tags import EventTag, is_wire_tag

logger = logging.getLogger(__name__)

# Mapping tag -> (entity model, wrapper building the event from the entity)
ENTITY_REGISTRY: Dict[str, Tuple[Type[BaseModel], Callable[[BaseModel], Event]]] = {
    EventTag.UPDATE.value: (Status, lambda entity: UpdateEvent(status=entity)),
    EventTag.NOTIFICATION.value: (Notification, lambda entity: NotificationEvent(notification=entity)),
    EventTag.CONVERSATION.value: (Conversation, lambda entity: ConversationEvent(conversation=entity)),
}


def decode(frame: Frame, log: Optional[logging.Logger] = None) -> Event:
    """Classify a frame into an Event. Raises ParseError for anything unusable."""
    log = log or logger
    if frame.is_heartbeat:
        return HeartbeatEvent()
    if frame.kind is not FrameKind.TEXT:
        raise ParseError(f"Receiving message is not ping, pong or text ({frame.kind.value})")

    envelope = Envelope.from_json(frame.data)
    return dispatch(envelope, log)


def dispatch(envelope: Envelope, log: Optional[logging.Logger] = None) -> Event:
    """Second phase: turn an envelope into an event based on its tag."""
    log = log or logger
    tag = envelope.event
    if not is_wire_tag(tag):
        raise ParseError(f"Unknown event is received: {tag}", tag=tag, payload=envelope.payload)
    if tag == EventTag.DELETE.value:
        return DeleteEvent(id=envelope.payload)

    model, wrap = ENTITY_REGISTRY[tag]
    try:
        entity = model.model_validate_json(envelope.payload)
    except ValidationError as exc:
        log.error("failed to parse %s: %s\n%s", tag, exc, envelope.payload)
        raise ParseError(f"Failed to parse {tag} payload: {exc}", tag=tag, payload=envelope.payload) from exc
    return wrap(entity)


__all__ = ["ENTITY_REGISTRY", "decode", "dispatch"]
