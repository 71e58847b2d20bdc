"""
In-process repositories, wired when no DATABASE_URL is configured.

State lives in dicts owned by one instance (APP scope in the container), so
it survives across requests but not restarts. Entities are copied on the way
in and out; callers never share objects with the store.
Lists iterate newest insertion first, so rows sharing a sort key keep
newest-first order.
"""

import asyncio
from dataclasses import replace
from typing import Optional

from messaging.domain.entities.attachment import Attachment
from messaging.domain.entities.conversation import Conversation
from messaging.domain.entities.message import Message
from messaging.domain.exceptions import EntityNotFoundError
from messaging.domain.ports.repositories import (
    AttachmentRepository,
    ConversationRepository,
    MessageRepository,
)
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.pagination import (
    ConversationFilters,
    PaginationParams,
)
from messaging.domain.value_objects.user_id import UserId


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self):
        self._rows: dict[str, Conversation] = {}
        self._lock = asyncio.Lock()

    async def create(self, conversation: Conversation) -> None:
        async with self._lock:
            self._rows[conversation.id.value] = replace(conversation)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        row = self._rows.get(conversation_id.value)
        return replace(row) if row else None

    async def list_by_user(
        self, user_id: UserId, filters: ConversationFilters
    ) -> list[Conversation]:
        rows = [
            row
            for row in reversed(list(self._rows.values()))
            if row.user_id == user_id
            and (filters.channel is None or row.channel == filters.channel)
            and (filters.status is None or row.status == filters.status)
        ]
        rows.sort(key=lambda row: row.updated_at, reverse=True)
        window = rows[filters.offset : filters.offset + filters.limit]
        return [replace(row) for row in window]

    async def update(self, conversation: Conversation) -> None:
        async with self._lock:
            if conversation.id.value not in self._rows:
                raise EntityNotFoundError(
                    "Conversation not found", entity_id=conversation.id.value
                )
            self._rows[conversation.id.value] = replace(conversation)

    async def delete(self, conversation_id: ConversationId) -> bool:
        async with self._lock:
            return self._rows.pop(conversation_id.value, None) is not None

    async def ping(self) -> bool:
        return True


class InMemoryMessageRepository(MessageRepository):
    def __init__(self):
        self._rows: dict[str, Message] = {}
        self._lock = asyncio.Lock()

    async def create(self, message: Message) -> None:
        async with self._lock:
            self._rows[message.id.value] = replace(
                message, metadata=dict(message.metadata), attachments=[]
            )

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        row = self._rows.get(message_id.value)
        return self._copy(row) if row else None

    async def list_by_conversation(
        self, conversation_id: ConversationId, pagination: PaginationParams
    ) -> list[Message]:
        rows = [
            row
            for row in reversed(list(self._rows.values()))
            if row.conversation_id == conversation_id
        ]
        rows.sort(key=lambda row: row.timestamp, reverse=True)
        window = rows[pagination.offset : pagination.offset + pagination.limit]
        return [self._copy(row) for row in window]

    async def update(self, message: Message) -> None:
        async with self._lock:
            if message.id.value not in self._rows:
                raise EntityNotFoundError("Message not found", entity_id=message.id.value)
            self._rows[message.id.value] = replace(
                message, metadata=dict(message.metadata), attachments=[]
            )

    async def delete(self, message_id: MessageId) -> bool:
        async with self._lock:
            return self._rows.pop(message_id.value, None) is not None

    @staticmethod
    def _copy(row: Message) -> Message:
        return replace(row, metadata=dict(row.metadata), attachments=[])


class InMemoryAttachmentRepository(AttachmentRepository):
    def __init__(self):
        self._rows: dict[str, Attachment] = {}
        self._lock = asyncio.Lock()

    async def create(self, attachment: Attachment) -> None:
        async with self._lock:
            self._rows[attachment.id.value] = replace(attachment)

    async def get_by_id(self, attachment_id: AttachmentId) -> Optional[Attachment]:
        row = self._rows.get(attachment_id.value)
        return replace(row) if row else None

    async def list_by_message(self, message_id: MessageId) -> list[Attachment]:
        return [
            replace(row)
            for row in self._rows.values()
            if row.message_id == message_id
        ]

    async def delete(self, attachment_id: AttachmentId) -> bool:
        async with self._lock:
            return self._rows.pop(attachment_id.value, None) is not None
