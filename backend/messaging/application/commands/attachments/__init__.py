"""Attachment commands."""

from .create_attachment import CreateAttachmentCommand, CreateAttachmentHandler

__all__ = [
    "CreateAttachmentCommand",
    "CreateAttachmentHandler",
]
