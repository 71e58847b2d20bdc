"""
Message Repository Port - Interface for message persistence.
Implementation: messaging/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from messaging.domain.entities.message import Message
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.pagination import PaginationParams


class MessageRepository(ABC):
    @abstractmethod
    async def create(self, message: Message) -> None: ...

    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def list_by_conversation(
        self, conversation_id: ConversationId, pagination: PaginationParams
    ) -> list[Message]:
        """Messages of one conversation, newest first."""
        ...

    @abstractmethod
    async def update(self, message: Message) -> None: ...

    @abstractmethod
    async def delete(self, message_id: MessageId) -> bool: ...
