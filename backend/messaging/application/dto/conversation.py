"""Conversation DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from messaging.domain.entities.conversation import Conversation
from messaging.domain.value_objects.enums import Channel, ConversationStatus


class ConversationDTO(BaseModel):
    id: str
    user_id: str
    channel: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            user_id=conversation.user_id.value,
            channel=conversation.channel.value,
            status=conversation.status.value,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )


class ConversationListDTO(BaseModel):
    conversations: list[ConversationDTO]
    limit: int
    offset: int


class CreateConversationRequest(BaseModel):
    channel: Channel


class UpdateConversationStatusRequest(BaseModel):
    status: ConversationStatus


class ConversationFiltersDTO(BaseModel):
    channel: Optional[Channel] = None
    status: Optional[ConversationStatus] = None
