"""Counter table adapter implementing the TinyDB-backed port.

TinyDB has no server-side conditions, so each primitive runs its read and
write under one lock to give the same per-key atomicity a remote key-value
service offers through conditional expressions.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, cast

from tinydb import Query, TinyDB

from coffee_skill_engine.core.exceptions import (
    AttributeMissingError,
    ConditionalCheckFailedError,
    CounterBackendError,
)
from coffee_skill_engine.core.ports import CounterTablePort

# Provide a QueryLike alias for static checkers; at runtime use Any.
if TYPE_CHECKING:  # pragma: no cover - typing only
    from tinydb.queries import QueryLike  # type: ignore
else:
    QueryLike = Any  # type: ignore[misc,assignment]

KEY_ATTRIBUTE = "id"


def open_counter_db(data_dir: Path) -> TinyDB:
    """Open (creating if needed) the JSON file holding counter tables."""
    data_dir.mkdir(parents=True, exist_ok=True)
    return TinyDB(str(data_dir / "counters.json"))


def _key_cond(key: str) -> QueryLike:
    q = Query()
    return cast(QueryLike, q[KEY_ATTRIBUTE] == key)


class TinyDBCounterTable(CounterTablePort):
    """Concrete counter table storing one TinyDB document per key."""

    def __init__(self, db: TinyDB) -> None:
        self._db = db
        self._lock = threading.RLock()

    def _load(self, table: str, key: str) -> Optional[Dict[str, Any]]:
        raw = self._db.table(table).get(_key_cond(key))
        result = cast(Optional[Dict[str, Any]], raw)
        return dict(result) if result else None

    def get_item(self, table: str, key: str) -> Optional[Mapping[str, Any]]:
        try:
            with self._lock:
                return self._load(table, key)
        except (OSError, ValueError) as exc:
            raise CounterBackendError(f"failed to read item from {table}") from exc

    def increment_existing(
        self, table: str, key: str, attribute: str, amount: int = 1
    ) -> Mapping[str, Any]:
        try:
            with self._lock:
                existing = self._load(table, key)
                if existing is None or attribute not in existing:
                    raise AttributeMissingError(
                        f"The provided expression refers to an attribute that does not exist "
                        f"in the item: {attribute}"
                    )
                existing[attribute] = int(existing[attribute]) + amount
                self._db.table(table).update({attribute: existing[attribute]}, _key_cond(key))
                return existing
        except (OSError, ValueError) as exc:
            raise CounterBackendError(f"failed to increment {attribute} in {table}") from exc

    def create_if_absent(
        self,
        table: str,
        key: str,
        guard_attribute: str,
        values: Mapping[str, Any],
        defaults: Mapping[str, Any],
    ) -> Mapping[str, Any]:
        try:
            with self._lock:
                existing = self._load(table, key)
                if existing is not None and guard_attribute in existing:
                    raise ConditionalCheckFailedError(
                        f"The conditional request failed: {guard_attribute} already exists"
                    )
                item: Dict[str, Any] = existing or {KEY_ATTRIBUTE: key}
                for name, value in defaults.items():
                    item.setdefault(name, value)
                item.update(values)
                self._db.table(table).upsert(item, _key_cond(key))
                return item
        except (OSError, ValueError) as exc:
            raise CounterBackendError(f"failed to create item in {table}") from exc

    def set_attribute(self, table: str, key: str, attribute: str, value: Any) -> None:
        try:
            with self._lock:
                existing = self._load(table, key)
                item: Dict[str, Any] = existing or {KEY_ATTRIBUTE: key}
                item[attribute] = value
                self._db.table(table).upsert(item, _key_cond(key))
        except (OSError, ValueError) as exc:
            raise CounterBackendError(f"failed to set {attribute} in {table}") from exc


__all__ = ["TinyDBCounterTable", "open_counter_db", "KEY_ATTRIBUTE"]
