"""List Conversations Query."""

from dataclasses import dataclass, field

from messaging.application.common.interfaces import Query, QueryHandler
from messaging.domain.entities.conversation import Conversation
from messaging.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from messaging.domain.value_objects.pagination import ConversationFilters
from messaging.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: UserId
    filters: ConversationFilters = field(default_factory=ConversationFilters)


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        # Always read from the store: lists are not cached.
        return await self._conversation_repository.list_by_user(
            query.user_id, query.filters
        )
