"""Info and liveness routes."""

from __future__ import annotations

import asyncio
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from coffee_skill_engine import COFFEE_SKILL_VERSION
from coffee_skill_engine.core.exceptions import CounterStoreError
from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.services import ServiceContainer

from ..dependencies import get_service_container, require_healthcheck_token

router = APIRouter(tags=["health"])
logger = get_logger(__name__)

# Never written; reading it exercises the table without touching real users.
HEALTHCHECK_USER_ID = "healthcheck"


@router.get("/")
def read_root(
    services: Annotated[ServiceContainer, Depends(get_service_container)],
) -> dict[str, Any]:
    """Describe the skill: version, webhook path, locales and cleaning threshold."""
    locales = services.localization.locales() if services.localization else ()
    return {
        "skill": "coffee-skill-engine",
        "version": COFFEE_SKILL_VERSION,
        "webhook": "/alexa",
        "locales": list(locales),
        "cleaning_threshold": services.cleaning_threshold,
    }


@router.get("/alive", dependencies=[Depends(require_healthcheck_token)])
async def alive_check(
    services: Annotated[ServiceContainer, Depends(get_service_container)],
) -> JSONResponse:
    """Report whether the counter table answers reads."""
    store = services.counter_store
    if store is None:
        return JSONResponse(
            {"status": "degraded", "counter_store": "not configured"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    try:
        await asyncio.to_thread(store.get_count, HEALTHCHECK_USER_ID)
    except CounterStoreError as exc:
        logger.warning("counter store unreachable during health check: %s", exc)
        return JSONResponse(
            {"status": "degraded", "counter_store": "unreachable"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return JSONResponse({"status": "ok", "counter_store": "reachable"})


__all__ = ["router"]
