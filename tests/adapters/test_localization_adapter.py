"""Tests for locale resolution and string formatting."""

from __future__ import annotations

from typing import Sequence

import pytest

from coffee_skill_engine.adapters.localization import (
    DE_STRINGS,
    EN_STRINGS,
    LocalizationAdapter,
)

REQUIRED_KEYS = {
    "HELP_MESSAGE",
    "HELP_REPROMPT",
    "FALLBACK_MESSAGE",
    "FALLBACK_REPROMPT",
    "STOP_MESSAGE",
    "ERROR_MESSAGE",
}


@pytest.mark.parametrize("table", [EN_STRINGS, DE_STRINGS])
def test_tables_cover_the_same_keys(table) -> None:
    """Every bundled locale defines the platform keys and the skill keys."""
    assert REQUIRED_KEYS <= set(table)
    assert set(table) == set(EN_STRINGS)


@pytest.mark.parametrize(
    ("locale", "expected"),
    [
        ("en-US", "en"),
        ("en-GB", "en"),
        ("de-DE", "de"),
        ("de_AT", "de"),
        ("fr-FR", "en"),
        (None, "en"),
    ],
)
def test_resolve_locale_falls_back_to_language_then_default(locale, expected) -> None:
    """Exact locale → language → default locale's language."""
    assert LocalizationAdapter().resolve_locale(locale) == expected


def test_translate_formats_arguments(localization: LocalizationAdapter) -> None:
    """Arguments are substituted sprintf-style."""
    translator = localization.for_locale("en-US")
    assert translator.t("COFFEE_COUNT", 12) == "You have made 12 coffees."


def test_translate_german(localization: LocalizationAdapter) -> None:
    """German requests get German speech."""
    translator = localization.for_locale("de-DE")
    assert translator.t("COFFEE_COUNT", 3) == "Du hast 3 Kaffees gemacht."


def test_list_values_use_injected_chooser() -> None:
    """List-valued strings are picked by the injected chooser."""
    seen: list[Sequence[str]] = []

    def pick_last(options: Sequence[str]) -> str:
        seen.append(options)
        return options[-1]

    translator = LocalizationAdapter(chooser=pick_last).for_locale("en-US")

    assert translator.t("STOP_MESSAGE") == "Enjoy your coffee!"
    assert list(seen[0]) == list(EN_STRINGS["STOP_MESSAGE"])


def test_missing_key_falls_back_to_default_locale_then_key() -> None:
    """Keys absent from a locale use the default table; unknown keys echo themselves."""
    adapter = LocalizationAdapter(
        {"en": {"ONLY_EN": "english"}, "de": {}}, default_locale="en-US"
    )
    translator = adapter.for_locale("de-DE")

    assert translator.t("ONLY_EN") == "english"
    assert translator.t("NOPE") == "NOPE"


def test_unresolvable_default_locale_raises() -> None:
    """A default locale with no resources is a configuration error."""
    adapter = LocalizationAdapter({"de": {}}, default_locale="en-US")
    with pytest.raises(LookupError):
        adapter.for_locale("fr-FR")
