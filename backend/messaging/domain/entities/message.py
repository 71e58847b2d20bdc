"""
Message Entity - A single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from messaging.domain.entities.attachment import Attachment
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import ContentType, SenderType
from messaging.domain.value_objects.message_id import MessageId


@dataclass
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender_type: SenderType
    sender_id: str
    content: str
    content_type: ContentType
    timestamp: datetime
    metadata: dict[str, Any] = field(default_factory=dict)
    # Populated at read time, never persisted with the message row.
    attachments: list[Attachment] = field(default_factory=list)

    def __post_init__(self):
        self.sender_type = SenderType(self.sender_type)
        self.content_type = ContentType(self.content_type)
        if self.metadata is None:
            self.metadata = {}

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender_type: SenderType,
        sender_id: str,
        content: str,
        content_type: ContentType,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            sender_type=sender_type,
            sender_id=sender_id,
            content=content,
            content_type=content_type,
            timestamp=datetime.now(timezone.utc),
            metadata=dict(metadata or {}),
        )
