from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .account import Account, Entity


class Visibility(StrEnum):
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"
    LIST = "list"
    LOCAL = "local"


class Mention(Entity):
    id: str
    username: str
    acct: str
    url: Optional[str] = None


class Tag(Entity):
    name: str
    url: Optional[str] = None


class Attachment(Entity):
    id: str
    type: str
    url: Optional[str] = None
    preview_url: Optional[str] = None
    remote_url: Optional[str] = None
    description: Optional[str] = None


class Status(Entity):
    id: str
    uri: str
    url: Optional[str] = None
    account: Account
    content: str = ""
    created_at: datetime
    visibility: Visibility = Visibility.PUBLIC
    sensitive: bool = False
    spoiler_text: str = ""
    in_reply_to_id: Optional[str] = None
    in_reply_to_account_id: Optional[str] = None
    reblog: Optional["Status"] = None
    reblogs_count: int = 0
    favourites_count: int = 0
    replies_count: int = 0
    reblogged: Optional[bool] = None
    favourited: Optional[bool] = None
    muted: Optional[bool] = None
    bookmarked: Optional[bool] = None
    pinned: Optional[bool] = None
    language: Optional[str] = None
    media_attachments: List[Attachment] = Field(default_factory=list)
    mentions: List[Mention] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)
    emojis: List[Dict[str, Any]] = Field(default_factory=list)


Status.model_rebuild()

__all__ = ["Visibility", "Mention", "Tag", "Attachment", "Status"]
