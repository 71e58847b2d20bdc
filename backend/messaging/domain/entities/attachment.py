"""
Attachment Entity - A stored binary resource linked to one message.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.enums import AttachmentType
from messaging.domain.value_objects.message_id import MessageId


@dataclass
class Attachment:
    id: AttachmentId
    message_id: MessageId
    url: str
    type: AttachmentType
    size: int
    filename: str
    created_at: datetime

    def __post_init__(self):
        self.type = AttachmentType(self.type)
        if self.size < 0:
            raise ValueError(f"Invalid attachment size: {self.size}")
        if not self.url:
            raise ValueError("Attachment URL cannot be empty")
        if not self.filename:
            raise ValueError("Attachment filename cannot be empty")

    @classmethod
    def create(
        cls,
        message_id: MessageId,
        url: str,
        type: AttachmentType,
        size: int,
        filename: str,
    ) -> Attachment:
        return cls(
            id=AttachmentId.generate(),
            message_id=message_id,
            url=url,
            type=type,
            size=size,
            filename=filename,
            created_at=datetime.now(timezone.utc),
        )
