"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from coffee_skill_engine.core.models import CounterDetails


class CounterTablePort(Protocol):
    """Key-value table offering the conditional writes counters rely on.

    Every primitive is atomic with respect to the others for a single key.
    """

    def get_item(self, table: str, key: str) -> Optional[Mapping[str, Any]]:
        """Return the stored item for ``key`` or ``None`` when absent."""
        ...

    def increment_existing(
        self, table: str, key: str, attribute: str, amount: int = 1
    ) -> Mapping[str, Any]:
        """Add ``amount`` to ``attribute`` and return the updated item.

        Raises ``AttributeMissingError`` when the item or attribute does not exist.
        """
        ...

    def create_if_absent(
        self,
        table: str,
        key: str,
        guard_attribute: str,
        values: Mapping[str, Any],
        defaults: Mapping[str, Any],
    ) -> Mapping[str, Any]:
        """Write ``values`` (plus ``defaults`` for missing fields) if ``guard_attribute`` is absent.

        Raises ``ConditionalCheckFailedError`` when ``guard_attribute`` already exists.
        """
        ...

    def set_attribute(self, table: str, key: str, attribute: str, value: Any) -> None:
        """Unconditionally set ``attribute`` on ``key``, creating the item if needed."""
        ...


class CounterStorePort(Protocol):
    """Port exposing per-user coffee counter state."""

    def get_count(self, user_id: str) -> int:
        """Return the stored count or 0 for unknown users."""
        ...

    def get_counter_details(self, user_id: str) -> CounterDetails:
        """Return count and last maintenance checkpoint, zero-defaulted."""
        ...

    def increment_count(self, user_id: str) -> CounterDetails:
        """Atomically add one coffee, creating the record on first use."""
        ...

    def record_maintenance(self, user_id: str, count: int) -> None:
        """Store ``count`` as the last maintenance checkpoint."""
        ...


class TranslatorPort(Protocol):
    """Locale-bound string lookup."""

    locale: str

    def t(self, key: str, *args: Any) -> str:
        """Return the localized string for ``key`` formatted with ``args``."""
        ...


class LocalizationPort(Protocol):
    """Factory for locale-bound translators."""

    def for_locale(self, locale: Optional[str]) -> TranslatorPort:
        """Return a translator for ``locale`` (falling back to the default)."""
        ...

    def locales(self) -> tuple[str, ...]:
        """Return the locale keys that have string tables."""
        ...


__all__ = ["CounterTablePort", "CounterStorePort", "LocalizationPort", "TranslatorPort"]
