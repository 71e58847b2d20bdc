"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- conversations/ → get_conversation, list_conversations
- messages/      → get_message, list_messages
- attachments/   → get_attachment
"""

from messaging.application.queries.attachments import (
    GetAttachmentHandler,
    GetAttachmentQuery,
)
from messaging.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from messaging.application.queries.messages import (
    GetMessageHandler,
    GetMessageQuery,
    ListMessagesHandler,
    ListMessagesQuery,
)

__all__ = [
    # conversations
    "GetConversationQuery",
    "GetConversationHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
    # messages
    "GetMessageQuery",
    "GetMessageHandler",
    "ListMessagesQuery",
    "ListMessagesHandler",
    # attachments
    "GetAttachmentQuery",
    "GetAttachmentHandler",
]
