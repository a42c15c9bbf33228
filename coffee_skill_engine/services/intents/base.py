"""Shared plumbing for intent handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, FrozenSet

from coffee_skill_engine.core.intents import IntentType
from coffee_skill_engine.core.models import SkillRequest
from coffee_skill_engine.core.ports import CounterStorePort, TranslatorPort

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from coffee_skill_engine.services import ServiceContainer


class IntentHandler:  # pylint: disable=too-few-public-methods
    """Handler claiming a fixed set of intent types."""

    intents: ClassVar[FrozenSet[IntentType]] = frozenset()

    def can_handle(self, request: SkillRequest) -> bool:
        return request.intent in self.intents


def require_counter_store(services: "ServiceContainer") -> CounterStorePort:
    store = services.counter_store
    if store is None:
        raise RuntimeError("CounterStorePort has not been configured.")
    return store


def translator_for(request: SkillRequest, services: "ServiceContainer") -> TranslatorPort:
    localization = services.localization
    if localization is None:
        raise RuntimeError("LocalizationPort has not been configured.")
    return localization.for_locale(request.locale)


__all__ = ["IntentHandler", "require_counter_store", "translator_for"]
