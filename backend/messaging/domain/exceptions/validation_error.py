"""
DomainValidationError - Raised when input violates a business rule
(missing field, unknown enum value, size limit).
Maps to: HTTP 400 Bad Request (413 for oversized uploads)
"""

from typing import Optional


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class FileTooLargeError(DomainValidationError):
    """Upload exceeds the configured maximum size."""

    def __init__(self, max_size: int):
        super().__init__(
            f"File size exceeds maximum allowed size of {max_size} bytes",
            field="file",
        )
        self.max_size = max_size
