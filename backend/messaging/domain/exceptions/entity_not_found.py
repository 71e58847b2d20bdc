"""
EntityNotFoundError - Raised when a conversation, message or attachment
does not exist in the record store.
Maps to: HTTP 404 Not Found
"""

from typing import Optional


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(
        self,
        message: str = "The requested entity was not found.",
        entity_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity_id = entity_id
