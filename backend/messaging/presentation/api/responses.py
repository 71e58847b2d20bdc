"""
Response envelope and path-parameter helpers shared by the routers.

Every response body, success or error, has the shape:
    {"code": "SUCCESS" | "<ERROR_CODE>", "message": str, "data": any}
"""

from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from messaging.config.settings import Config
from messaging.domain.exceptions import NotFoundOrDeniedError

T = TypeVar("T")
ID = TypeVar("ID")

SUCCESS = "SUCCESS"
NOT_FOUND = "NOT_FOUND"
FORBIDDEN = "FORBIDDEN"
INVALID_REQUEST = "INVALID_REQUEST"
PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
UNAUTHORIZED = "UNAUTHORIZED"
SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
INTERNAL_ERROR = "INTERNAL_ERROR"


class ApiResponse(BaseModel, Generic[T]):
    code: str = SUCCESS
    message: str
    data: Optional[T] = None


def success(message: str, data: Any = None) -> ApiResponse:
    return ApiResponse(code=SUCCESS, message=message, data=data)


def error_body(code: str, message: str, data: Any = None) -> dict:
    return {"code": code, "message": message, "data": data}


def parse_id(factory: Callable[[str], ID], raw: str) -> ID:
    """
    Build an id value object from a path parameter.

    A malformed id cannot name an existing record, so it is reported exactly
    like an absent one.
    """
    try:
        return factory(raw)
    except ValueError:
        raise NotFoundOrDeniedError()


def clamp_limit(limit: int) -> int:
    """Page size bounded to 1..Config.MAX_PAGE_LIMIT."""
    return max(1, min(limit, Config.MAX_PAGE_LIMIT))


def clamp_offset(offset: int) -> int:
    return max(0, offset)
