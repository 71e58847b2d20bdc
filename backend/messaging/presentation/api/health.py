"""
Health API Router.

- /health: liveness, no dependencies touched
- /ready:  readiness, pings the record store and the cache; 503 if either fails
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from messaging.domain.ports.cache import CacheService
from messaging.domain.ports.repositories import ConversationRepository
from messaging.presentation.api.responses import (
    SERVICE_UNAVAILABLE,
    error_body,
    success,
)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return success("Service is healthy", {"status": "healthy"})


@router.get("/ready")
@inject
async def ready(
    conversation_repository: FromDishka[ConversationRepository],
    cache_service: FromDishka[CacheService],
):
    checks = {
        "database": await conversation_repository.ping(),
        "cache": await cache_service.ping(),
    }
    if all(checks.values()):
        return success("Service is ready", {"status": "ready", "checks": checks})
    return JSONResponse(
        status_code=503,
        content=error_body(
            SERVICE_UNAVAILABLE,
            "Service is not ready",
            {"status": "not_ready", "checks": checks},
        ),
    )
