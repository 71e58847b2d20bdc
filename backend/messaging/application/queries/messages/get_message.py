"""Get Message Query."""

from dataclasses import dataclass

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import Query, QueryHandler
from messaging.domain.entities.message import Message
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetMessageQuery(Query[Message]):
    message_id: MessageId
    user_id: UserId


class GetMessageHandler(QueryHandler[Message]):
    def __init__(self, access: ConversationAccess):
        self._access = access

    async def execute(self, query: GetMessageQuery) -> Message:
        return await self._access.get_message(query.message_id, query.user_id)
