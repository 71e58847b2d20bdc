"""Message queries."""

from .get_message import GetMessageHandler, GetMessageQuery
from .list_messages import ListMessagesHandler, ListMessagesQuery

__all__ = [
    "GetMessageQuery",
    "GetMessageHandler",
    "ListMessagesQuery",
    "ListMessagesHandler",
]
