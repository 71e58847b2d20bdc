"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from messaging.domain.value_objects.user_id import UserId
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.enums import (
    AttachmentType,
    Channel,
    ContentType,
    ConversationStatus,
    SenderType,
)
from messaging.domain.value_objects.pagination import (
    ConversationFilters,
    PaginationParams,
)

__all__ = [
    "UserId",
    "ConversationId",
    "MessageId",
    "AttachmentId",
    "AttachmentType",
    "Channel",
    "ContentType",
    "ConversationStatus",
    "SenderType",
    "ConversationFilters",
    "PaginationParams",
]
