"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, DI
and the exception → HTTP status mapping.

Error mapping (body is always the {"code", "message", "data"} envelope):
- EntityNotFoundError / NotFoundOrDeniedError → 404 NOT_FOUND
- AccessDeniedError                          → 403 FORBIDDEN
- FileTooLargeError                          → 413 PAYLOAD_TOO_LARGE
- DomainValidationError, request validation  → 400 INVALID_REQUEST
- HTTPException 401                          → 401 UNAUTHORIZED
- StorageUnavailableError, anything else     → 500 INTERNAL_ERROR (generic message)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from messaging import __version__
from messaging.config.logging_config import (
    CORRELATION_HEADER,
    correlation_id_var,
    new_correlation_id,
    setup_logging,
)
from messaging.config.settings import Config, get_config
from messaging.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    FileTooLargeError,
    StorageUnavailableError,
)
from messaging.domain.exceptions.not_found_or_denied import NOT_FOUND_OR_DENIED
from messaging.presentation.api import (
    attachments_router,
    conversations_router,
    health_router,
    messages_router,
)
from messaging.presentation.api.responses import (
    FORBIDDEN,
    INTERNAL_ERROR,
    INVALID_REQUEST,
    NOT_FOUND,
    PAYLOAD_TOO_LARGE,
    UNAUTHORIZED,
    error_body,
)
from messaging.setup.ioc.container import create_container

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

_HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: INVALID_REQUEST,
    status.HTTP_401_UNAUTHORIZED: UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: FORBIDDEN,
    status.HTTP_404_NOT_FOUND: NOT_FOUND,
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: PAYLOAD_TOO_LARGE,
}


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds the caller's correlation ID (or a fresh one) for the request and echoes it."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or new_correlation_id()

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        # NotFoundOrDeniedError resolves here too (EntityNotFoundError comes
        # first in its MRO), so absent and foreign records look identical.
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body(NOT_FOUND, NOT_FOUND_OR_DENIED),
        )

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=error_body(FORBIDDEN, "Access denied"),
        )

    @app.exception_handler(FileTooLargeError)
    async def file_too_large_handler(request: Request, exc: FileTooLargeError):
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content=error_body(PAYLOAD_TOO_LARGE, exc.message),
        )

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                INVALID_REQUEST, exc.message, {"field": exc.field} if exc.field else None
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        details = [
            {"loc": list(e.get("loc", [])), "msg": e.get("msg", "")} for e in errors
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(INVALID_REQUEST, "Validation error", details),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                _HTTP_ERROR_CODES.get(exc.status_code, INTERNAL_ERROR), str(exc.detail)
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable_handler(
        request: Request, exc: StorageUnavailableError
    ):
        logger.error(f"[STORAGE ERROR] {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR, "Internal server error"),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(
            f"[GLOBAL ERROR] {request.method} {request.url.path}: "
            f"{type(exc).__name__}: {exc}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR, "Internal server error"),
        )


def create_fastapi_app(
    container: Optional[AsyncContainer] = None,
    config: Optional[type[Config]] = None,
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from config when omitted.
            The container is closed on application shutdown.
        config: Settings profile (default: get_config() for ENVIRONMENT)
    """
    config = config or get_config()
    container = container or create_container(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Messaging service started (environment={config.ENVIRONMENT}, "
            f"debug={config.DEBUG}). "
            "DI container initialized."
        )
        yield
        await container.close()
        logger.info("Messaging service shutdown. DI container closed.")

    app = FastAPI(
        title="Messaging API",
        description="Multi-channel conversation and messaging backend",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(conversations_router, prefix=API_PREFIX)
    app.include_router(messages_router, prefix=API_PREFIX)
    app.include_router(attachments_router, prefix=API_PREFIX)

    return app


def create_app() -> FastAPI:
    """Entry point for uvicorn: configures logging, then builds the app for ENVIRONMENT."""
    config = get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH or None, config.LOG_FORMAT)
    return create_fastapi_app(config=config)
