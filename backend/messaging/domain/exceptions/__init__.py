"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from messaging.domain.exceptions.entity_not_found import EntityNotFoundError
from messaging.domain.exceptions.access_denied import AccessDeniedError
from messaging.domain.exceptions.not_found_or_denied import NotFoundOrDeniedError
from messaging.domain.exceptions.validation_error import (
    DomainValidationError,
    FileTooLargeError,
)
from messaging.domain.exceptions.storage_unavailable import StorageUnavailableError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "NotFoundOrDeniedError",
    "DomainValidationError",
    "FileTooLargeError",
    "StorageUnavailableError",
]
