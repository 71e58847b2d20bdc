"""Prisma Attachment Repository Implementation."""

import logging
from typing import Optional

from prisma import Prisma
from prisma.errors import PrismaError
from prisma.models import Attachment as PrismaAttachment

from messaging.domain.entities.attachment import Attachment
from messaging.domain.exceptions import StorageUnavailableError
from messaging.domain.ports.repositories.attachment_repository import (
    AttachmentRepository,
)
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.message_id import MessageId

logger = logging.getLogger(__name__)


class PrismaAttachmentRepository(AttachmentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaAttachment) -> Attachment:
        return Attachment(
            id=AttachmentId(record.id),
            message_id=MessageId(record.message_id),
            url=record.url,
            type=record.type,
            size=record.size,
            filename=record.filename,
            created_at=record.created_at,
        )

    async def create(self, attachment: Attachment) -> None:
        try:
            await self._prisma.attachment.create(
                data={
                    "id": attachment.id.value,
                    "message_id": attachment.message_id.value,
                    "url": attachment.url,
                    "type": attachment.type.value,
                    "size": attachment.size,
                    "filename": attachment.filename,
                    "created_at": attachment.created_at,
                }
            )
        except PrismaError as e:
            logger.error(f"Failed to create attachment {attachment.id.value}: {e}")
            raise StorageUnavailableError() from e

    async def get_by_id(self, attachment_id: AttachmentId) -> Optional[Attachment]:
        try:
            record = await self._prisma.attachment.find_unique(
                where={"id": attachment_id.value}
            )
        except PrismaError as e:
            logger.error(f"Failed to read attachment {attachment_id.value}: {e}")
            raise StorageUnavailableError() from e
        return self._to_entity(record) if record else None

    async def list_by_message(self, message_id: MessageId) -> list[Attachment]:
        try:
            records = await self._prisma.attachment.find_many(
                where={"message_id": message_id.value},
                order=[{"created_at": "asc"}, {"id": "asc"}],
            )
        except PrismaError as e:
            logger.error(f"Failed to list attachments of message {message_id.value}: {e}")
            raise StorageUnavailableError() from e
        return [self._to_entity(record) for record in records]

    async def delete(self, attachment_id: AttachmentId) -> bool:
        try:
            record = await self._prisma.attachment.delete(
                where={"id": attachment_id.value}
            )
        except PrismaError as e:
            logger.error(f"Failed to delete attachment {attachment_id.value}: {e}")
            raise StorageUnavailableError() from e
        return record is not None
