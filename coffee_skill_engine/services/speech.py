"""Speech fragments shared by the counter intents."""

from __future__ import annotations

from coffee_skill_engine.core.models import CounterDetails
from coffee_skill_engine.core.ports import TranslatorPort

CLEANING_THRESHOLD = 40


def coffees_until_cleaning(details: CounterDetails, threshold: int = CLEANING_THRESHOLD) -> int:
    """Return how many coffees remain before the machine is due; <= 0 means due now."""
    return details.last_maintenance + threshold - details.count


def cleaning_status(
    translator: TranslatorPort, details: CounterDetails, threshold: int = CLEANING_THRESHOLD
) -> str:
    """Return the cleaning suffix appended to counter announcements."""
    remaining = coffees_until_cleaning(details, threshold)
    if remaining <= 0:
        return translator.t("CLEAN_NOW")
    return translator.t("COFFEES_LEFT", remaining)


def with_cleaning_status(
    translator: TranslatorPort,
    speech: str,
    details: CounterDetails,
    threshold: int = CLEANING_THRESHOLD,
) -> str:
    """Join ``speech`` and the cleaning suffix into one utterance."""
    return f"{speech} {cleaning_status(translator, details, threshold)}"


__all__ = [
    "CLEANING_THRESHOLD",
    "cleaning_status",
    "coffees_until_cleaning",
    "with_cleaning_status",
]
