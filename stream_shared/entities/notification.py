from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Optional

from .account import Account, Entity
from .status import Status


class NotificationType(StrEnum):
    """Notification kinds known to the client. Servers may send others."""

    MENTION = "mention"
    STATUS = "status"
    REBLOG = "reblog"
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    FAVOURITE = "favourite"
    POLL = "poll"
    UPDATE = "update"
    MOVE = "move"
    EMOJI_REACTION = "pleroma:emoji_reaction"
    CHAT_MENTION = "pleroma:chat_mention"
    REPORT = "pleroma:report"


class Notification(Entity):
    id: str
    type: str
    created_at: datetime
    account: Account
    status: Optional[Status] = None
    emoji: Optional[str] = None

    @property
    def known_type(self) -> Optional[NotificationType]:
        try:
            return NotificationType(self.type)
        except ValueError:
            return None


__all__ = ["NotificationType", "Notification"]
