from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base for API entities. Fields the client does not model are dropped."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class Account(Entity):
    id: str
    username: str
    acct: str
    display_name: str = ""
    locked: bool = False
    bot: Optional[bool] = None
    created_at: Optional[datetime] = None
    note: str = ""
    url: Optional[str] = None
    avatar: Optional[str] = None
    header: Optional[str] = None
    followers_count: int = Field(default=0, ge=0)
    following_count: int = Field(default=0, ge=0)
    statuses_count: int = Field(default=0, ge=0)


__all__ = ["Entity", "Account"]
