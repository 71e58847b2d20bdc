"""Prisma repositories against a mocked client (needs a generated Prisma client)."""

from unittest.mock import AsyncMock, MagicMock

import pytest

pytest.importorskip("prisma.models")

from messaging.domain.entities.attachment import Attachment
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import AttachmentType
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.pagination import ConversationFilters, PaginationParams
from messaging.domain.value_objects.user_id import UserId
from messaging.infrastructure.persistence.prisma_attachment_repository import (
    PrismaAttachmentRepository,
)
from messaging.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from messaging.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)


@pytest.fixture()
def prisma():
    client = MagicMock()
    for model in (client.message, client.conversation, client.attachment):
        model.find_many = AsyncMock(return_value=[])
        model.create = AsyncMock()
    return client


async def test_message_pages_break_timestamp_ties_by_id(prisma):
    repo = PrismaMessageRepository(prisma)

    await repo.list_by_conversation(
        ConversationId.generate(), PaginationParams(limit=10, offset=20)
    )

    kwargs = prisma.message.find_many.call_args.kwargs
    assert kwargs["order"] == [{"timestamp": "desc"}, {"id": "desc"}]
    assert kwargs["take"] == 10
    assert kwargs["skip"] == 20


async def test_conversation_list_breaks_updated_at_ties_by_id(prisma):
    repo = PrismaConversationRepository(prisma)

    await repo.list_by_user(UserId("user-1"), ConversationFilters())

    kwargs = prisma.conversation.find_many.call_args.kwargs
    assert kwargs["order"] == [{"updated_at": "desc"}, {"id": "desc"}]


async def test_attachment_size_beyond_32_bits_is_written_unchanged(prisma):
    repo = PrismaAttachmentRepository(prisma)
    size = 3 * 1024**3
    attachment = Attachment.create(
        message_id=MessageId.generate(),
        url="/uploads/user-1/video.mp4",
        type=AttachmentType.VIDEO,
        size=size,
        filename="video.mp4",
    )

    await repo.create(attachment)

    assert prisma.attachment.create.call_args.kwargs["data"]["size"] == size
