"""
Prisma-backed record store provider.

Imported by the container only when DATABASE_URL is configured: importing
prisma requires the generated client (`prisma generate`).
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from messaging.domain.ports.repositories import (
    AttachmentRepository,
    ConversationRepository,
    MessageRepository,
)
from messaging.infrastructure.persistence.prisma_attachment_repository import (
    PrismaAttachmentRepository,
)
from messaging.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from messaging.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

logger = logging.getLogger(__name__)


class PrismaRepositoryProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE when app starts, shared across all requests
        - Disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_attachment_repository(self, prisma: Prisma) -> AttachmentRepository:
        return PrismaAttachmentRepository(prisma)
