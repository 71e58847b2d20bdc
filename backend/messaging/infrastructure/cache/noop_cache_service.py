"""No-op CacheService: every read misses, every write is dropped."""

from typing import Optional

from messaging.domain.entities.conversation import Conversation
from messaging.domain.ports.cache import CacheService, MessagePage
from messaging.domain.value_objects.conversation_id import ConversationId


class NoOpCacheService(CacheService):
    async def get_conversation(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        return None

    async def set_conversation(self, conversation: Conversation) -> None:
        pass

    async def delete_conversation(self, conversation_id: ConversationId) -> None:
        pass

    async def get_messages(
        self, conversation_id: ConversationId
    ) -> Optional[MessagePage]:
        return None

    async def messages_version(
        self, conversation_id: ConversationId
    ) -> Optional[int]:
        return 0

    async def set_messages(
        self, conversation_id: ConversationId, page: MessagePage, version: int
    ) -> bool:
        return False

    async def delete_messages(self, conversation_id: ConversationId) -> None:
        pass

    async def ping(self) -> bool:
        return True
