"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from messaging.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from messaging.domain.ports.repositories.message_repository import MessageRepository
from messaging.domain.ports.repositories.attachment_repository import (
    AttachmentRepository,
)

__all__ = [
    "ConversationRepository",
    "MessageRepository",
    "AttachmentRepository",
]
