"""Envelope in, envelope out: the path every platform request takes."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from coffee_skill_engine.core.api_models import RequestEnvelope
from coffee_skill_engine.core.config import config
from coffee_skill_engine.core.logging import get_logger, log_context
from coffee_skill_engine.core.models import SkillRequest
from coffee_skill_engine.utils.identifiers import get_log_safe_user_id

from . import ServiceContainer

logger = get_logger(__name__)


class InvalidEnvelopeError(ValueError):
    """Raised when a request envelope cannot be parsed into a SkillRequest."""


class SkillIdMismatchError(PermissionError):
    """Raised when an envelope is addressed to a different skill."""


def parse_envelope(
    payload: Mapping[str, Any],
    *,
    default_locale: Optional[str] = None,
    expected_application_id: Optional[str] = None,
) -> SkillRequest:
    """Validate ``payload`` and normalize it into a SkillRequest."""
    try:
        envelope = RequestEnvelope.model_validate(payload)
        request = SkillRequest.from_envelope(
            envelope, default_locale=default_locale or config.DEFAULT_LOCALE
        )
    except (ValidationError, ValueError) as exc:
        raise InvalidEnvelopeError(str(exc)) from exc

    if expected_application_id and envelope.application_id() != expected_application_id:
        raise SkillIdMismatchError("envelope addressed to a different skill")
    return request


async def process_envelope(
    payload: Mapping[str, Any], services: ServiceContainer
) -> dict[str, Any]:
    """Dispatch one platform request and return the response envelope as JSON data."""
    dispatcher = services.dispatcher
    if dispatcher is None:
        raise RuntimeError("IntentDispatcher has not been configured.")

    request = parse_envelope(payload, expected_application_id=config.SKILL_APPLICATION_ID)
    safe_user = get_log_safe_user_id(request.user_id, secret=config.LOG_PSEUDONYM_SECRET)
    with log_context(
        correlation_id=request.request_id,
        log_user_id=safe_user,
        request_type=request.request_type,
        intent=request.intent.value,
    ):
        logger.info("skill request received")
        response = await dispatcher.dispatch(request, services)
        logger.info(
            "skill response ready",
            extra={"ends_session": bool(response.should_end_session)},
        )
    return response.to_envelope().model_dump(exclude_none=True)


__all__ = [
    "InvalidEnvelopeError",
    "SkillIdMismatchError",
    "parse_envelope",
    "process_envelope",
]
