"""
StorageUnavailableError - Raised when a durable collaborator (record store,
file store) fails. Maps to: HTTP 500 with a generic message.
"""


class StorageUnavailableError(Exception):
    """Raised when the record store or file store cannot complete an operation."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message)
