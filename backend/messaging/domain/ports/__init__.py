"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/     → Record store (Prisma / in-memory)
- cache.py          → Conversation and message-page cache (Redis / no-op)
- event_publisher.py → message.received notifications (Redis pub/sub / no-op)
- file_storage.py   → Attachment bytes (local disk / disabled)
"""

from messaging.domain.ports.cache import CacheService, MessagePage
from messaging.domain.ports.event_publisher import EventPublisher
from messaging.domain.ports.file_storage import FileInfo, FileStorage, StoredFile

__all__ = [
    "CacheService",
    "MessagePage",
    "EventPublisher",
    "FileInfo",
    "FileStorage",
    "StoredFile",
]
