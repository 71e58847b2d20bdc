"""
ConversationAccess - Ownership checks and cache-aside reads shared by every
handler that touches an existing conversation, message or attachment.

Cache policy:
- Read-Through: check the cache first, fall back to the record store
- The cache is populated ONLY after a store read confirmed existence and ownership
- Writes invalidate (delete) entries, they never refresh them
- TTLs bound staleness: conversations 30 min, message pages 10 min

Ownership:
- A conversation belongs to exactly one user
- A message is accessible iff its conversation is
- An attachment is accessible iff its message is

Absent and foreign entities raise the same NotFoundOrDeniedError.

Error Handling:
- Cache failures never fail the operation: reads degrade to a miss,
  writes/deletes to a no-op, both with a logged warning
- Record store failures (StorageUnavailableError) propagate
"""

import logging
from dataclasses import replace
from typing import Optional

from messaging.domain.entities.attachment import Attachment
from messaging.domain.entities.conversation import Conversation
from messaging.domain.entities.message import Message
from messaging.domain.exceptions import NotFoundOrDeniedError
from messaging.domain.ports.cache import CacheService, MessagePage
from messaging.domain.ports.repositories import (
    AttachmentRepository,
    ConversationRepository,
    MessageRepository,
)
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ConversationAccess:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        attachment_repository: AttachmentRepository,
        cache_service: CacheService,
    ):
        self._conv_repo = conversation_repository
        self._msg_repo = message_repository
        self._att_repo = attachment_repository
        self._cache = cache_service

    async def get_conversation(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Conversation:
        """
        Resolve a conversation the caller owns.

        Flow:
        1. Cache hit owned by user_id → return it
        2. Cache miss, or cached record owned by someone else → read the store
        3. Store record absent or foreign → NotFoundOrDeniedError
        4. Store record owned by user_id → populate cache, return it
        """
        cached = await self._cached_conversation(conversation_id)
        if cached is not None:
            if cached.is_owned_by(user_id):
                logger.debug(f"Cache HIT for conversation {conversation_id.value}")
                return cached
            logger.debug(
                f"Cached conversation {conversation_id.value} has another owner, "
                "re-reading store"
            )

        conversation = await self._conv_repo.get_by_id(conversation_id)
        if conversation is None or not conversation.is_owned_by(user_id):
            raise NotFoundOrDeniedError()

        await self._cache_conversation(conversation)
        return conversation

    async def get_message(self, message_id: MessageId, user_id: UserId) -> Message:
        """Fetch a message, verify its conversation belongs to user_id, load attachments."""
        message = await self._msg_repo.get_by_id(message_id)
        if message is None:
            raise NotFoundOrDeniedError()

        await self.get_conversation(message.conversation_id, user_id)

        message.attachments = await self.load_attachments(message)
        return message

    async def load_attachments(self, message: Message) -> list[Attachment]:
        """Attachments of one message; a failure degrades to an empty list."""
        try:
            return await self._att_repo.list_by_message(message.id)
        except Exception as e:
            logger.error(
                f"Failed to load attachments for message {message.id.value}: {e}"
            )
            return []

    # ==================== CACHE (best effort) ====================

    async def invalidate_conversation(self, conversation_id: ConversationId) -> None:
        try:
            await self._cache.delete_conversation(conversation_id)
        except Exception as e:
            logger.warning(
                f"Cache invalidation failed for conversation {conversation_id.value}: {e}"
            )

    async def cached_messages(
        self, conversation_id: ConversationId
    ) -> Optional[MessagePage]:
        try:
            return await self._cache.get_messages(conversation_id)
        except Exception as e:
            logger.warning(
                f"Cache read failed for messages of {conversation_id.value}: {e}"
            )
            return None

    async def messages_version(
        self, conversation_id: ConversationId
    ) -> Optional[int]:
        """Take before a store read; pass to cache_messages afterwards."""
        try:
            return await self._cache.messages_version(conversation_id)
        except Exception as e:
            logger.warning(
                f"Cache version read failed for messages of {conversation_id.value}: {e}"
            )
            return None

    async def cache_messages(
        self,
        conversation_id: ConversationId,
        limit: int,
        messages: list[Message],
        version: Optional[int],
    ) -> None:
        """
        Write back a page read from the store.

        Dropped when the version is unknown, or when the page was invalidated
        after the version was taken (the read may predate a send).
        """
        if version is None:
            return
        # Pages are cached without attachments; those are always read from the store.
        page = MessagePage(
            limit=limit,
            messages=[replace(message, attachments=[]) for message in messages],
        )
        try:
            await self._cache.set_messages(conversation_id, page, version)
        except Exception as e:
            logger.warning(
                f"Cache write failed for messages of {conversation_id.value}: {e}"
            )

    async def invalidate_messages(self, conversation_id: ConversationId) -> None:
        try:
            await self._cache.delete_messages(conversation_id)
        except Exception as e:
            logger.warning(
                f"Cache invalidation failed for messages of {conversation_id.value}: {e}"
            )

    async def _cached_conversation(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        try:
            return await self._cache.get_conversation(conversation_id)
        except Exception as e:
            logger.warning(
                f"Cache read failed for conversation {conversation_id.value}: {e}"
            )
            return None

    async def _cache_conversation(self, conversation: Conversation) -> None:
        try:
            await self._cache.set_conversation(conversation)
        except Exception as e:
            logger.warning(
                f"Cache write failed for conversation {conversation.id.value}: {e}"
            )
