"""
Authentication Dependency for FastAPI.

- Extracts and validates the bearer JWT from the Authorization header
- Returns AuthUser (the acting user id) for use in route handlers
- Raises HTTPException 401 if the token is missing, expired or invalid

Token rules: HS256 signed with Config.JWT_SECRET, issuer Config.JWT_ISSUER,
exp/iat/iss required. The user id is the "user_id" claim, or "sub" when
"user_id" is absent.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from messaging.config.settings import Config
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class AuthUser:
    user_id: UserId


# auto_error=False so a missing header is a 401, not FastAPI's default 403
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing bearer token")

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.JWT_SECRET,
            algorithms=["HS256"],
            issuer=Config.JWT_ISSUER,
            options={"require": ["exp", "iat", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise _unauthorized("Invalid token")

    user_id = claims.get("user_id") or claims.get("sub")
    if not isinstance(user_id, str) or not user_id.strip():
        raise _unauthorized("Missing required claims in token")

    return AuthUser(user_id=UserId(user_id))
