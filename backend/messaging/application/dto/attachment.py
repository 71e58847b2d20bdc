"""Attachment DTOs for API request/response."""

from datetime import datetime

from pydantic import BaseModel

from messaging.domain.entities.attachment import Attachment
from messaging.domain.ports.file_storage import StoredFile


class AttachmentDTO(BaseModel):
    id: str
    message_id: str
    url: str
    type: str
    size: int
    filename: str
    created_at: datetime

    @classmethod
    def from_entity(cls, attachment: Attachment) -> "AttachmentDTO":
        return cls(
            id=attachment.id.value,
            message_id=attachment.message_id.value,
            url=attachment.url,
            type=attachment.type.value,
            size=attachment.size,
            filename=attachment.filename,
            created_at=attachment.created_at,
        )


class UploadedFileDTO(BaseModel):
    """Reference returned by a bare upload (no attachment record)."""

    url: str
    filename: str
    size: int
    type: str

    @classmethod
    def from_stored(cls, stored: StoredFile) -> "UploadedFileDTO":
        return cls(
            url=stored.url,
            filename=stored.filename,
            size=stored.size,
            type=stored.type.value,
        )
