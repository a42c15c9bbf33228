"""Intent types and resolution for the coffee skill."""

from __future__ import annotations

from enum import Enum
from typing import Optional

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class IntentType(str, Enum):
    """Enumeration of every request shape the skill distinguishes."""

    LAUNCH = "launch"
    MAKE_COFFEE = "MakeCoffeeIntent"
    COUNT_COFFEE = "CountCoffeeIntent"
    PERFORM_MAINTENANCE = "PerformMaintenanceIntent"
    HELP = "AMAZON.HelpIntent"
    FALLBACK = "AMAZON.FallbackIntent"
    CANCEL = "AMAZON.CancelIntent"
    STOP = "AMAZON.StopIntent"
    SESSION_ENDED = "session-ended"
    UNKNOWN = "unknown"


_NAMED_INTENTS = {
    IntentType.MAKE_COFFEE,
    IntentType.COUNT_COFFEE,
    IntentType.PERFORM_MAINTENANCE,
    IntentType.HELP,
    IntentType.FALLBACK,
    IntentType.CANCEL,
    IntentType.STOP,
}
_INTENTS_BY_NAME = {intent.value: intent for intent in _NAMED_INTENTS}


def resolve_intent(request_type: str, intent_name: Optional[str] = None) -> IntentType:
    """Map a platform ``(request type, intent name)`` pair onto an ``IntentType``.

    Anything the skill does not recognize resolves to ``IntentType.UNKNOWN``.
    """
    if request_type == LAUNCH_REQUEST:
        return IntentType.LAUNCH
    if request_type == SESSION_ENDED_REQUEST:
        return IntentType.SESSION_ENDED
    if request_type == INTENT_REQUEST and intent_name:
        return _INTENTS_BY_NAME.get(intent_name, IntentType.UNKNOWN)
    return IntentType.UNKNOWN


__all__ = [
    "IntentType",
    "resolve_intent",
    "LAUNCH_REQUEST",
    "INTENT_REQUEST",
    "SESSION_ENDED_REQUEST",
]
