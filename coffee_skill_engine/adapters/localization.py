"""Localization adapter: locale-keyed string tables with sprintf-style arguments."""

from __future__ import annotations

import random
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.core.ports import LocalizationPort, TranslatorPort

logger = get_logger(__name__)

StringValue = Union[str, Sequence[str]]
Chooser = Callable[[Sequence[str]], str]

EN_STRINGS: dict[str, StringValue] = {
    "SKILL_NAME": "Coffee Counter",
    "WELCOME_MESSAGE": (
        "Welcome to coffee machine skill. "
        "You can say make coffee, perform maintenance or count coffee."
    ),
    "HELP_MESSAGE": "You can say make coffee, say perform maintenance or say count coffees.",
    "HELP_REPROMPT": "What can I help you with?",
    "FALLBACK_MESSAGE": (
        "The coffee machine skill can't help you with that. "
        "It can keep track of your coffees if you say make coffee. What can I help you with?"
    ),
    "FALLBACK_REPROMPT": "What can I help you with?",
    "STOP_MESSAGE": ["Goodbye!", "Enjoy your coffee!"],
    "ERROR_MESSAGE": "Sorry, an error occurred.",
    "COFFEE_RECORDED": "Coffee recorded. Your coffee count is now %s.",
    "COFFEE_COUNT": "You have made %s coffees.",
    "MAINTENANCE_RECORDED": "You have cleaned the machine on coffee number %s.",
    "CLEAN_NOW": "The machine needs cleaning now!",
    "COFFEES_LEFT": "%s coffees left before cleaning.",
    "RECORD_FAILED": "Sorry, I couldn't record your coffee. Please try again.",
}

DE_STRINGS: dict[str, StringValue] = {
    "SKILL_NAME": "Kaffeezähler",
    "WELCOME_MESSAGE": (
        "Willkommen beim Kaffeemaschinen-Skill. "
        "Du kannst sagen: mach Kaffee, Wartung durchführen oder Kaffee zählen."
    ),
    "HELP_MESSAGE": "Du kannst sagen: mach Kaffee, Wartung durchführen oder Kaffee zählen.",
    "HELP_REPROMPT": "Wie kann ich dir helfen?",
    "FALLBACK_MESSAGE": (
        "Dabei kann dir der Kaffeemaschinen-Skill nicht helfen. "
        "Sag mach Kaffee, um einen Kaffee zu zählen. Wie kann ich dir helfen?"
    ),
    "FALLBACK_REPROMPT": "Wie kann ich dir helfen?",
    "STOP_MESSAGE": ["Auf Wiedersehen!", "Genieß deinen Kaffee!"],
    "ERROR_MESSAGE": "Entschuldigung, ein Fehler ist aufgetreten.",
    "COFFEE_RECORDED": "Kaffee gezählt. Dein Kaffeezähler steht jetzt bei %s.",
    "COFFEE_COUNT": "Du hast %s Kaffees gemacht.",
    "MAINTENANCE_RECORDED": "Du hast die Maschine bei Kaffee Nummer %s gereinigt.",
    "CLEAN_NOW": "Die Maschine muss jetzt gereinigt werden!",
    "COFFEES_LEFT": "Noch %s Kaffees bis zur nächsten Reinigung.",
    "RECORD_FAILED": (
        "Entschuldigung, ich konnte deinen Kaffee nicht zählen. Bitte versuche es noch einmal."
    ),
}

LANGUAGE_STRINGS: dict[str, Mapping[str, StringValue]] = {
    "en": EN_STRINGS,
    "de": DE_STRINGS,
}


def _language_of(locale: str) -> str:
    return locale.replace("_", "-").split("-", 1)[0].lower()


class Translator(TranslatorPort):
    """String lookup bound to one resolved locale."""

    def __init__(
        self,
        locale: str,
        strings: Mapping[str, StringValue],
        fallback: Mapping[str, StringValue],
        chooser: Chooser,
    ) -> None:
        self.locale = locale
        self._strings = strings
        self._fallback = fallback
        self._chooser = chooser

    def t(self, key: str, *args: Any) -> str:
        value = self._strings.get(key)
        if value is None:
            value = self._fallback.get(key)
        if value is None:
            logger.warning("missing localization key %s for locale %s", key, self.locale)
            return key
        # List values hold interchangeable variants
        if not isinstance(value, str):
            value = self._chooser(list(value))
        return value % args if args else value


class LocalizationAdapter(LocalizationPort):
    """Resolve locales onto the bundled string tables."""

    def __init__(
        self,
        resources: Optional[Mapping[str, Mapping[str, StringValue]]] = None,
        *,
        default_locale: str = "en-US",
        chooser: Optional[Chooser] = None,
    ) -> None:
        self._resources = dict(resources or LANGUAGE_STRINGS)
        self._default_locale = default_locale
        self._chooser: Chooser = chooser or random.choice

    def resolve_locale(self, locale: Optional[str]) -> str:
        """Return the best available resource key for ``locale``.

        Precedence: exact locale → its language → the default locale's language.
        """
        for candidate in (locale, self._default_locale):
            if not candidate:
                continue
            if candidate in self._resources:
                return candidate
            language = _language_of(candidate)
            if language in self._resources:
                return language
        raise LookupError(f"no localization resources for {locale!r} or the default locale")

    def locales(self) -> tuple[str, ...]:
        return tuple(sorted(self._resources))

    def for_locale(self, locale: Optional[str]) -> Translator:
        resolved = self.resolve_locale(locale)
        fallback = self._resources[self.resolve_locale(self._default_locale)]
        return Translator(resolved, self._resources[resolved], fallback, self._chooser)


__all__ = ["LocalizationAdapter", "Translator", "LANGUAGE_STRINGS", "EN_STRINGS", "DE_STRINGS"]
