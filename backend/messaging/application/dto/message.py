"""Message DTOs for API request/response."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from messaging.application.dto.attachment import AttachmentDTO
from messaging.domain.entities.message import Message
from messaging.domain.value_objects.enums import ContentType, SenderType


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    conversation_id: str
    sender_type: str
    sender_id: str
    content: str
    content_type: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime
    attachments: list[AttachmentDTO] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_type=message.sender_type.value,
            sender_id=message.sender_id,
            content=message.content,
            content_type=message.content_type.value,
            metadata=message.metadata,
            timestamp=message.timestamp,
            attachments=[AttachmentDTO.from_entity(a) for a in message.attachments],
        )


class MessageListDTO(BaseModel):
    messages: list[MessageDTO]
    limit: int
    offset: int


class SendMessageRequest(BaseModel):
    sender_type: SenderType = SenderType.USER
    content: str = Field(..., min_length=1)
    content_type: ContentType = ContentType.TEXT
    metadata: dict[str, Any] = Field(default_factory=dict)
