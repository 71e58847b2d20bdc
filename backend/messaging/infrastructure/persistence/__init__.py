"""
Persistence Layer - Record store implementations.

- prisma_*_repository.py: Prisma (PostgreSQL) implementations of the ports
- memory.py: in-process implementations, used when DATABASE_URL is unset

The Prisma modules import the generated client, so they are imported
directly from their modules (and only when a database is configured),
never re-exported here.
"""

from messaging.infrastructure.persistence.memory import (
    InMemoryAttachmentRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryConversationRepository",
    "InMemoryMessageRepository",
    "InMemoryAttachmentRepository",
]
