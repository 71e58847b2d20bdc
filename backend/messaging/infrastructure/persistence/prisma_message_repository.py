"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id              String   @id
        conversation_id String
        sender_type     String
        sender_id       String
        content         String
        content_type    String
        metadata        Json     @default("{}")
        timestamp       DateTime @default(now()) @db.Timestamptz(6)
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (MessageId)
- Prisma: conversation_id (str) ←→ Domain: conversation_id (ConversationId)
- Prisma: metadata (Json) ←→ Domain: metadata (dict), written through prisma.Json
- attachments are never written here; they live in their own table
"""

import logging
from typing import Optional

from prisma import Json, Prisma
from prisma.errors import PrismaError
from prisma.models import Message as PrismaMessage

from messaging.domain.entities.message import Message
from messaging.domain.exceptions import EntityNotFoundError, StorageUnavailableError
from messaging.domain.ports.repositories.message_repository import MessageRepository
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.pagination import PaginationParams

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender_type=record.sender_type,
            sender_id=record.sender_id,
            content=record.content,
            content_type=record.content_type,
            metadata=dict(record.metadata) if isinstance(record.metadata, dict) else {},
            timestamp=record.timestamp,
        )

    async def create(self, message: Message) -> None:
        try:
            await self._prisma.message.create(
                data={
                    "id": message.id.value,
                    "conversation_id": message.conversation_id.value,
                    "sender_type": message.sender_type.value,
                    "sender_id": message.sender_id,
                    "content": message.content,
                    "content_type": message.content_type.value,
                    "metadata": Json(message.metadata),
                    "timestamp": message.timestamp,
                }
            )
        except PrismaError as e:
            logger.error(f"Failed to create message {message.id.value}: {e}")
            raise StorageUnavailableError() from e

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        try:
            record = await self._prisma.message.find_unique(
                where={"id": message_id.value}
            )
        except PrismaError as e:
            logger.error(f"Failed to read message {message_id.value}: {e}")
            raise StorageUnavailableError() from e
        return self._to_entity(record) if record else None

    async def list_by_conversation(
        self, conversation_id: ConversationId, pagination: PaginationParams
    ) -> list[Message]:
        """
        Get messages for a conversation, newest first.

        Args:
            conversation_id: ConversationId value object
            pagination: limit/offset window over the newest-first ordering

        Ties on timestamp are broken by id so pages never overlap.
        """
        try:
            records = await self._prisma.message.find_many(
                where={"conversation_id": conversation_id.value},
                order=[{"timestamp": "desc"}, {"id": "desc"}],
                take=pagination.limit,
                skip=pagination.offset,
            )
        except PrismaError as e:
            logger.error(
                f"Failed to list messages of conversation {conversation_id.value}: {e}"
            )
            raise StorageUnavailableError() from e
        return [self._to_entity(record) for record in records]

    async def update(self, message: Message) -> None:
        try:
            record = await self._prisma.message.update(
                where={"id": message.id.value},
                data={
                    "content": message.content,
                    "content_type": message.content_type.value,
                    "metadata": Json(message.metadata),
                },
            )
        except PrismaError as e:
            logger.error(f"Failed to update message {message.id.value}: {e}")
            raise StorageUnavailableError() from e
        if record is None:
            raise EntityNotFoundError("Message not found", entity_id=message.id.value)

    async def delete(self, message_id: MessageId) -> bool:
        try:
            record = await self._prisma.message.delete(where={"id": message_id.value})
        except PrismaError as e:
            logger.error(f"Failed to delete message {message_id.value}: {e}")
            raise StorageUnavailableError() from e
        return record is not None
