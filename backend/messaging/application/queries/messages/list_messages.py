"""
List Messages Query - Messages of a conversation, newest first.

Flow:
1. Ownership check on the conversation (ConversationAccess)
2. First page (offset 0): serve from the message-page cache when it covers
   the requested limit
3. Otherwise read the record store; a first-page read refreshes the cache,
   unless a send invalidated the page while the read was in flight
4. Attach each message's attachments (always from the store)
"""

import logging
from dataclasses import dataclass, field

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import Query, QueryHandler
from messaging.domain.entities.message import Message
from messaging.domain.ports.repositories import MessageRepository
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.pagination import PaginationParams
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    conversation_id: ConversationId
    user_id: UserId
    pagination: PaginationParams = field(default_factory=PaginationParams)


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, access: ConversationAccess, message_repository: MessageRepository):
        self._access = access
        self._msg_repo = message_repository

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        await self._access.get_conversation(query.conversation_id, query.user_id)

        messages = await self._read_page(query.conversation_id, query.pagination)

        for message in messages:
            message.attachments = await self._access.load_attachments(message)
        return messages

    async def _read_page(
        self, conversation_id: ConversationId, pagination: PaginationParams
    ) -> list[Message]:
        first_page = pagination.offset == 0
        version = None

        if first_page:
            page = await self._access.cached_messages(conversation_id)
            if page is not None and page.covers(pagination.limit):
                logger.debug(f"Cache HIT for messages of {conversation_id.value}")
                return list(page.messages[: pagination.limit])
            version = await self._access.messages_version(conversation_id)

        messages = await self._msg_repo.list_by_conversation(conversation_id, pagination)

        if first_page:
            await self._access.cache_messages(
                conversation_id, pagination.limit, messages, version
            )
        return messages
