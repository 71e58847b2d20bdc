"""Get Conversation Query."""

from dataclasses import dataclass

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import Query, QueryHandler
from messaging.domain.entities.conversation import Conversation
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: ConversationId
    user_id: UserId


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(self, access: ConversationAccess):
        self._access = access

    async def execute(self, query: GetConversationQuery) -> Conversation:
        return await self._access.get_conversation(query.conversation_id, query.user_id)
