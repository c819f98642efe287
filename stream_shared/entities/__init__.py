from .account import Account, Entity
from .conversation import Conversation
from .notification import Notification, NotificationType
from .status import Attachment, Mention, Status, Tag, Visibility

__all__ = [
    "Entity",
    "Account",
    "Status",
    "Visibility",
    "Mention",
    "Tag",
    "Attachment",
    "Notification",
    "NotificationType",
    "Conversation",
]
