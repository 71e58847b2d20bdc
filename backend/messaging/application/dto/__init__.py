"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversation.py → ConversationDTO, request bodies
- message.py      → MessageDTO, SendMessageRequest
- attachment.py   → AttachmentDTO, UploadedFileDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from messaging.application.dto.attachment import AttachmentDTO, UploadedFileDTO
from messaging.application.dto.conversation import (
    ConversationDTO,
    ConversationListDTO,
    CreateConversationRequest,
    UpdateConversationStatusRequest,
)
from messaging.application.dto.message import (
    MessageDTO,
    MessageListDTO,
    SendMessageRequest,
)

__all__ = [
    "AttachmentDTO",
    "UploadedFileDTO",
    "ConversationDTO",
    "ConversationListDTO",
    "CreateConversationRequest",
    "UpdateConversationStatusRequest",
    "MessageDTO",
    "MessageListDTO",
    "SendMessageRequest",
]
