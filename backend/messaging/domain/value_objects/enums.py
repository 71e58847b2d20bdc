"""
Enumerations for conversation, message and attachment kinds.

Values are the wire/storage strings; every enum is a str subclass so it
serializes to JSON and compares equal to its raw value.
"""

from enum import Enum


class Channel(str, Enum):
    WEB = "web"
    WHATSAPP = "whatsapp"
    MESSENGER = "messenger"
    INSTAGRAM = "instagram"


class ConversationStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    ARCHIVED = "archived"


class SenderType(str, Enum):
    USER = "user"
    BOT = "bot"
    SYSTEM = "system"


class ContentType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"


class AttachmentType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    FILE = "file"
    AUDIO = "audio"
