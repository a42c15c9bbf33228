"""Intent handlers and the default priority order they run in."""

from __future__ import annotations

from coffee_skill_engine.services.intent_dispatcher import ErrorHandler, RequestHandler

from .builtin_intents import (
    CatchAllErrorHandler,
    ExitHandler,
    FallbackHandler,
    HelpHandler,
    SessionEndedHandler,
    WelcomeHandler,
)
from .counter_intents import CountCoffeeHandler, MakeCoffeeHandler, PerformMaintenanceHandler


def default_request_handlers() -> list[RequestHandler]:
    """Return a fresh handler chain, highest priority first."""
    return [
        MakeCoffeeHandler(),
        CountCoffeeHandler(),
        PerformMaintenanceHandler(),
        HelpHandler(),
        ExitHandler(),
        FallbackHandler(),
        SessionEndedHandler(),
        WelcomeHandler(),
    ]


def default_error_handlers() -> list[ErrorHandler]:
    """Return the error handler chain."""
    return [CatchAllErrorHandler()]


__all__ = [
    "CatchAllErrorHandler",
    "CountCoffeeHandler",
    "ExitHandler",
    "FallbackHandler",
    "HelpHandler",
    "MakeCoffeeHandler",
    "PerformMaintenanceHandler",
    "SessionEndedHandler",
    "WelcomeHandler",
    "default_error_handlers",
    "default_request_handlers",
]
