"""Tests for the TinyDB counter table adapter."""

from __future__ import annotations

from pathlib import Path

import pytest
from tinydb import Query, TinyDB

from coffee_skill_engine.adapters.counter_table import TinyDBCounterTable, open_counter_db
from coffee_skill_engine.core.exceptions import (
    AttributeMissingError,
    ConditionalCheckFailedError,
)

TABLE = "counters"


def test_get_item_missing_returns_none(counter_table: TinyDBCounterTable) -> None:
    """Absent keys read as None rather than raising."""
    assert counter_table.get_item(TABLE, "ghost") is None


def test_increment_requires_existing_attribute(counter_table: TinyDBCounterTable) -> None:
    """Incrementing an absent item or attribute raises AttributeMissingError."""
    with pytest.raises(AttributeMissingError):
        counter_table.increment_existing(TABLE, "ghost", "count")

    counter_table.set_attribute(TABLE, "partial", "lastMaintenance", 0)
    with pytest.raises(AttributeMissingError):
        counter_table.increment_existing(TABLE, "partial", "count")


def test_create_then_increment(counter_table: TinyDBCounterTable) -> None:
    """Created items carry values plus defaults and increment afterwards."""
    created = counter_table.create_if_absent(
        TABLE, "u1", "count", {"count": 1}, {"lastMaintenance": 0}
    )
    assert created == {"id": "u1", "count": 1, "lastMaintenance": 0}

    updated = counter_table.increment_existing(TABLE, "u1", "count", 1)
    assert updated["count"] == 2
    assert counter_table.get_item(TABLE, "u1") == {"id": "u1", "count": 2, "lastMaintenance": 0}


def test_create_fails_when_guard_attribute_exists(counter_table: TinyDBCounterTable) -> None:
    """A second create for the same counter is a conditional check failure."""
    counter_table.create_if_absent(TABLE, "u1", "count", {"count": 1}, {"lastMaintenance": 0})

    with pytest.raises(ConditionalCheckFailedError):
        counter_table.create_if_absent(TABLE, "u1", "count", {"count": 1}, {"lastMaintenance": 0})
    assert counter_table.get_item(TABLE, "u1")["count"] == 1


def test_create_keeps_existing_fields_over_defaults(counter_table: TinyDBCounterTable) -> None:
    """Defaults only fill fields that the item does not already have."""
    counter_table.set_attribute(TABLE, "u2", "lastMaintenance", 3)

    created = counter_table.create_if_absent(
        TABLE, "u2", "count", {"count": 1}, {"lastMaintenance": 0}
    )

    assert created["lastMaintenance"] == 3
    assert created["count"] == 1


def test_set_attribute_is_unconditional(counter_table: TinyDBCounterTable) -> None:
    """set_attribute creates or overwrites without conditions."""
    counter_table.set_attribute(TABLE, "u3", "lastMaintenance", 4)
    counter_table.set_attribute(TABLE, "u3", "lastMaintenance", 9)

    assert counter_table.get_item(TABLE, "u3") == {"id": "u3", "lastMaintenance": 9}


def test_tables_are_separate(counter_db: TinyDB, counter_table: TinyDBCounterTable) -> None:
    """Items live in the named TinyDB table only."""
    counter_table.create_if_absent("a", "u1", "count", {"count": 1}, {})

    assert counter_table.get_item("b", "u1") is None
    assert counter_db.table("a").get(Query().id == "u1") is not None


def test_open_counter_db_persists_to_data_dir(tmp_path: Path) -> None:
    """The file-backed database survives reopening."""
    data_dir = tmp_path / "nested"
    db = open_counter_db(data_dir)
    TinyDBCounterTable(db).create_if_absent(TABLE, "u1", "count", {"count": 1}, {})
    db.close()

    reopened = open_counter_db(data_dir)
    try:
        assert TinyDBCounterTable(reopened).get_item(TABLE, "u1") == {"id": "u1", "count": 1}
    finally:
        reopened.close()
    assert (data_dir / "counters.json").exists()
