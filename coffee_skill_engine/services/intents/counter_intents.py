"""Stateful intents: record a coffee, report the count, record a cleaning."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from coffee_skill_engine.core.intents import IntentType
from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.core.models import SkillRequest, SkillResponse
from coffee_skill_engine.services.speech import with_cleaning_status

from .base import IntentHandler, require_counter_store, translator_for

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from coffee_skill_engine.services import ServiceContainer

logger = get_logger(__name__)


class MakeCoffeeHandler(IntentHandler):
    """Opening the skill or saying "make coffee" records one coffee."""

    intents = frozenset({IntentType.LAUNCH, IntentType.MAKE_COFFEE})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        translator = translator_for(request, services)
        store = require_counter_store(services)
        try:
            details = await asyncio.to_thread(store.increment_count, request.user_id)
        except Exception as exc:  # pylint: disable=broad-except
            # A storage hiccup must not end the session; ask the user to try again.
            logger.error("could not record coffee: %s", exc, exc_info=exc)
            apology = translator.t("RECORD_FAILED")
            return SkillResponse(speech_text=apology, reprompt_text=apology)
        speech = with_cleaning_status(
            translator,
            translator.t("COFFEE_RECORDED", details.count),
            details,
            services.cleaning_threshold,
        )
        return SkillResponse(speech_text=speech)


class CountCoffeeHandler(IntentHandler):
    """Report how many coffees were made and how far off the next cleaning is."""

    intents = frozenset({IntentType.COUNT_COFFEE})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        translator = translator_for(request, services)
        store = require_counter_store(services)
        details = await asyncio.to_thread(store.get_counter_details, request.user_id)
        speech = with_cleaning_status(
            translator,
            translator.t("COFFEE_COUNT", details.count),
            details,
            services.cleaning_threshold,
        )
        return SkillResponse(speech_text=speech)


class PerformMaintenanceHandler(IntentHandler):
    """Checkpoint the current count as the last cleaning."""

    intents = frozenset({IntentType.PERFORM_MAINTENANCE})

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        translator = translator_for(request, services)
        store = require_counter_store(services)
        count = await asyncio.to_thread(store.get_count, request.user_id)
        await asyncio.to_thread(store.record_maintenance, request.user_id, count)
        logger.info("maintenance recorded", extra={"coffee_count": count})
        return SkillResponse(speech_text=translator.t("MAINTENANCE_RECORDED", count))


__all__ = ["MakeCoffeeHandler", "CountCoffeeHandler", "PerformMaintenanceHandler"]
