from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .account import Account, Entity
from .status import Status


class Conversation(Entity):
    id: str
    accounts: List[Account] = Field(default_factory=list)
    last_status: Optional[Status] = None
    unread: bool = False


__all__ = ["Conversation"]
