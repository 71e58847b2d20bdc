"""
Cache Port - Ephemeral single-entity cache in front of the record store.

Implementations must be best-effort: a read failure is reported as a miss
(None), a write or delete failure is logged and swallowed. Nothing here may
raise into the application layer.

Keys are namespaced by entity kind:
- "conversation:{id}"            -> one Conversation
- "messages:{conversation_id}"   -> first page of a conversation's messages
- "messages_version:{conversation_id}" -> counter bumped by every page invalidation

A page read from the store is written back only if no invalidation happened
since the version was read (see set_messages), so a slow reader cannot
restore a page that a concurrent send already invalidated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from messaging.domain.entities.conversation import Conversation
from messaging.domain.entities.message import Message
from messaging.domain.value_objects.conversation_id import ConversationId


@dataclass
class MessagePage:
    """First page of a conversation (newest first) and the limit it was read with."""

    limit: int
    messages: list[Message] = field(default_factory=list)

    def covers(self, limit: int) -> bool:
        # A short page holds every message, so it answers any limit.
        return limit <= self.limit or len(self.messages) < self.limit


class CacheService(ABC):
    @abstractmethod
    async def get_conversation(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def set_conversation(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def delete_conversation(self, conversation_id: ConversationId) -> None: ...

    @abstractmethod
    async def get_messages(
        self, conversation_id: ConversationId
    ) -> Optional[MessagePage]: ...

    @abstractmethod
    async def messages_version(
        self, conversation_id: ConversationId
    ) -> Optional[int]:
        """Invalidation counter of the page (0 if never bumped, None if unreadable)."""

    @abstractmethod
    async def set_messages(
        self, conversation_id: ConversationId, page: MessagePage, version: int
    ) -> bool:
        """Store page only if messages_version is still version. True if written."""

    @abstractmethod
    async def delete_messages(self, conversation_id: ConversationId) -> None:
        """Drop the cached page and bump messages_version."""

    @abstractmethod
    async def ping(self) -> bool: ...
