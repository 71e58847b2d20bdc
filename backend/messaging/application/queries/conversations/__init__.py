"""Conversation-related queries."""

from .get_conversation import GetConversationHandler, GetConversationQuery
from .list_conversations import ListConversationsHandler, ListConversationsQuery

__all__ = [
    "GetConversationQuery",
    "GetConversationHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
]
