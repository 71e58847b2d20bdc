"""
Attachment Repository Port - Interface for attachment persistence.
Implementation: messaging/infrastructure/persistence/prisma_attachment_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from messaging.domain.entities.attachment import Attachment
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.message_id import MessageId


class AttachmentRepository(ABC):
    @abstractmethod
    async def create(self, attachment: Attachment) -> None: ...

    @abstractmethod
    async def get_by_id(self, attachment_id: AttachmentId) -> Optional[Attachment]: ...

    @abstractmethod
    async def list_by_message(self, message_id: MessageId) -> list[Attachment]: ...

    @abstractmethod
    async def delete(self, attachment_id: AttachmentId) -> bool: ...
