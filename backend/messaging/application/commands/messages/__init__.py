"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
]
