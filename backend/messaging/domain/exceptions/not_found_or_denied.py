"""
NotFoundOrDeniedError - The entity is absent OR the caller does not own it.

Both cases carry the same message so a caller cannot test for the existence
of another user's conversations, messages or attachments.
Maps to: HTTP 404 Not Found
"""

from messaging.domain.exceptions.access_denied import AccessDeniedError
from messaging.domain.exceptions.entity_not_found import EntityNotFoundError

NOT_FOUND_OR_DENIED = "Resource not found or access denied"


class NotFoundOrDeniedError(EntityNotFoundError, AccessDeniedError):
    def __init__(self):
        super().__init__(NOT_FOUND_OR_DENIED)
