"""
Conversation Repository Port - Interface for conversation persistence.
Implementations:
- messaging/infrastructure/persistence/prisma_conversation_repository.py
- messaging/infrastructure/persistence/memory.py (no DATABASE_URL configured)

Implementations raise StorageUnavailableError when the store cannot be reached.
"""

from abc import ABC, abstractmethod
from typing import Optional

from messaging.domain.entities.conversation import Conversation
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.pagination import ConversationFilters
from messaging.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def create(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def list_by_user(
        self, user_id: UserId, filters: ConversationFilters
    ) -> list[Conversation]:
        """Conversations of one user, most recently updated first."""
        ...

    @abstractmethod
    async def update(self, conversation: Conversation) -> None:
        """Persist mutable fields. Raises EntityNotFoundError if the row is gone."""
        ...

    @abstractmethod
    async def delete(self, conversation_id: ConversationId) -> bool: ...

    @abstractmethod
    async def ping(self) -> bool: ...
