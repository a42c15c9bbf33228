"""Voice platform webhook route."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.services import ServiceContainer
from coffee_skill_engine.services.request_pipeline import (
    InvalidEnvelopeError,
    SkillIdMismatchError,
    process_envelope,
)

from ..dependencies import get_service_container

router = APIRouter(tags=["skill"])
logger = get_logger(__name__)


@router.post("/alexa")
async def handle_skill_request(
    request: Request,
    services: Annotated[ServiceContainer, Depends(get_service_container)],
) -> dict[str, Any]:
    """Dispatch one voice platform request and return its speech response."""
    try:
        payload = await request.json()
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError both derive from ValueError
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is not JSON"
        ) from exc
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Request body must be an object"
        )

    try:
        return await process_envelope(payload, services)
    except InvalidEnvelopeError as exc:
        logger.warning("rejected malformed envelope: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed skill request"
        ) from exc
    except SkillIdMismatchError as exc:
        logger.warning("rejected envelope for another skill")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc


__all__ = ["router"]
