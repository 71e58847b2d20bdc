"""Shared application-layer building blocks."""

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)

__all__ = [
    "ConversationAccess",
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
]
