"""Conversation commands."""

from .create_conversation import CreateConversationCommand, CreateConversationHandler
from .update_status import (
    UpdateConversationStatusCommand,
    UpdateConversationStatusHandler,
)

__all__ = [
    "CreateConversationCommand",
    "CreateConversationHandler",
    "UpdateConversationStatusCommand",
    "UpdateConversationStatusHandler",
]
