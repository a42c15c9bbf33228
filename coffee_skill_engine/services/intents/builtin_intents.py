"""Stateless intents: help, fallback, exit, session end, welcome, and errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coffee_skill_engine.core.intents import IntentType
from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.core.models import SkillRequest, SkillResponse

from .base import IntentHandler, translator_for

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from coffee_skill_engine.services import ServiceContainer

logger = get_logger(__name__)


class HelpHandler(IntentHandler):
    """Explain what the skill can do."""

    intents = frozenset({IntentType.HELP})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        translator = translator_for(request, services)
        return SkillResponse(
            speech_text=translator.t("HELP_MESSAGE"),
            reprompt_text=translator.t("HELP_REPROMPT"),
        )


class ExitHandler(IntentHandler):
    """Say goodbye on cancel or stop."""

    intents = frozenset({IntentType.CANCEL, IntentType.STOP})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        translator = translator_for(request, services)
        return SkillResponse(speech_text=translator.t("STOP_MESSAGE"), should_end_session=True)


class FallbackHandler(IntentHandler):
    """The platform matched no sample utterance."""

    intents = frozenset({IntentType.FALLBACK})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        translator = translator_for(request, services)
        return SkillResponse(
            speech_text=translator.t("FALLBACK_MESSAGE"),
            reprompt_text=translator.t("FALLBACK_REPROMPT"),
        )


class SessionEndedHandler(IntentHandler):
    """Acknowledge session end; the platform ignores any speech here."""

    intents = frozenset({IntentType.SESSION_ENDED})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        _ = services
        logger.info("session ended with reason: %s", request.reason)
        return SkillResponse()


class WelcomeHandler:
    """Lowest-priority handler: anything unclaimed gets the welcome prompt."""

    def can_handle(self, request: SkillRequest) -> bool:
        _ = request
        return True

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        if request.intent is IntentType.UNKNOWN:
            logger.info("unrecognized request", extra={"intent_name": request.intent_name})
        speech = translator_for(request, services).t("WELCOME_MESSAGE")
        return SkillResponse(speech_text=speech, reprompt_text=speech)


class CatchAllErrorHandler:
    """Answer any failure with the generic localized error message."""

    def can_handle(self, request: SkillRequest, error: Exception) -> bool:
        _ = (request, error)
        return True

    async def handle(
        self, request: SkillRequest, error: Exception, services: "ServiceContainer"
    ) -> SkillResponse:
        logger.error("error handled: %s", error, exc_info=error)
        message = translator_for(request, services).t("ERROR_MESSAGE")
        return SkillResponse(speech_text=message, reprompt_text=message)


__all__ = [
    "CatchAllErrorHandler",
    "ExitHandler",
    "FallbackHandler",
    "HelpHandler",
    "SessionEndedHandler",
    "WelcomeHandler",
]
