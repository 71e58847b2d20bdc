"""
API Routers - FastAPI endpoint definitions, mounted under /api/v1.
"""

from messaging.presentation.api.attachments import router as attachments_router
from messaging.presentation.api.conversations import router as conversations_router
from messaging.presentation.api.health import router as health_router
from messaging.presentation.api.messages import router as messages_router

__all__ = [
    "conversations_router",
    "messages_router",
    "attachments_router",
    "health_router",
]
