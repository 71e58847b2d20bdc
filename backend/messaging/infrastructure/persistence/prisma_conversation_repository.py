"""
Prisma Conversation Repository Implementation.

- Implements ConversationRepository port from domain layer
- Maps between Prisma models and domain entities
- Every Prisma failure is logged and re-raised as StorageUnavailableError;
  the underlying message never reaches the caller

Mapping:
- Prisma model fields: id, user_id, channel, status, created_at, updated_at
- Domain entity: Conversation with value objects (ConversationId, UserId)
"""

import logging
from typing import Optional

from prisma import Prisma
from prisma.errors import PrismaError
from prisma.models import Conversation as PrismaConversation

from messaging.domain.entities.conversation import Conversation
from messaging.domain.exceptions import EntityNotFoundError, StorageUnavailableError
from messaging.domain.ports.repositories import ConversationRepository
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.pagination import ConversationFilters
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            user_id=UserId(record.user_id),
            channel=record.channel,
            status=record.status,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def create(self, conversation: Conversation) -> None:
        try:
            await self._prisma.conversation.create(
                data={
                    "id": conversation.id.value,
                    "user_id": conversation.user_id.value,
                    "channel": conversation.channel.value,
                    "status": conversation.status.value,
                    "created_at": conversation.created_at,
                    "updated_at": conversation.updated_at,
                }
            )
        except PrismaError as e:
            logger.error(f"Failed to create conversation {conversation.id.value}: {e}")
            raise StorageUnavailableError() from e

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        try:
            record = await self._prisma.conversation.find_unique(
                where={"id": conversation_id.value}
            )
        except PrismaError as e:
            logger.error(f"Failed to read conversation {conversation_id.value}: {e}")
            raise StorageUnavailableError() from e
        return self._to_entity(record) if record else None

    async def list_by_user(
        self, user_id: UserId, filters: ConversationFilters
    ) -> list[Conversation]:
        """Get conversations for user, ordered by updated_at desc."""
        where: dict = {"user_id": user_id.value}
        if filters.channel is not None:
            where["channel"] = filters.channel.value
        if filters.status is not None:
            where["status"] = filters.status.value

        try:
            records = await self._prisma.conversation.find_many(
                where=where,
                order=[{"updated_at": "desc"}, {"id": "desc"}],
                take=filters.limit,
                skip=filters.offset,
            )
        except PrismaError as e:
            logger.error(f"Failed to list conversations for {user_id.value}: {e}")
            raise StorageUnavailableError() from e
        return [self._to_entity(record) for record in records]

    async def update(self, conversation: Conversation) -> None:
        try:
            record = await self._prisma.conversation.update(
                where={"id": conversation.id.value},
                data={
                    "status": conversation.status.value,
                    "updated_at": conversation.updated_at,
                },
            )
        except PrismaError as e:
            logger.error(f"Failed to update conversation {conversation.id.value}: {e}")
            raise StorageUnavailableError() from e
        if record is None:
            raise EntityNotFoundError(
                "Conversation not found", entity_id=conversation.id.value
            )

    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete conversation by ID. Returns True if deleted."""
        try:
            record = await self._prisma.conversation.delete(
                where={"id": conversation_id.value}
            )
        except PrismaError as e:
            logger.error(f"Failed to delete conversation {conversation_id.value}: {e}")
            raise StorageUnavailableError() from e
        return record is not None

    async def ping(self) -> bool:
        try:
            await self._prisma.query_raw("SELECT 1")
            return True
        except PrismaError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
