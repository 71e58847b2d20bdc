"""Attachment queries."""

from .get_attachment import GetAttachmentHandler, GetAttachmentQuery

__all__ = [
    "GetAttachmentQuery",
    "GetAttachmentHandler",
]
