"""Application service layer scaffolding for intent handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from coffee_skill_engine.core.ports import CounterStorePort, LocalizationPort

from .speech import CLEANING_THRESHOLD

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_dispatcher import IntentDispatcher


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    counter_store: Optional[CounterStorePort] = None
    localization: Optional[LocalizationPort] = None
    dispatcher: Optional["IntentDispatcher"] = None
    cleaning_threshold: int = CLEANING_THRESHOLD


def build_default_services(
    *,
    counter_store: Optional[CounterStorePort] = None,
    localization: Optional[LocalizationPort] = None,
    cleaning_threshold: int = CLEANING_THRESHOLD,
) -> ServiceContainer:
    """Return a service container with the default handler chain wired in."""

    # pylint: disable=import-outside-toplevel
    from .intent_dispatcher import IntentDispatcher
    from .intents import default_error_handlers, default_request_handlers

    dispatcher = IntentDispatcher(default_request_handlers(), default_error_handlers())
    return ServiceContainer(
        counter_store=counter_store,
        localization=localization,
        dispatcher=dispatcher,
        cleaning_threshold=cleaning_threshold,
    )


__all__ = ["ServiceContainer", "build_default_services"]
