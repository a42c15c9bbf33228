"""Tests for assembling the production service container."""

from __future__ import annotations

from pathlib import Path

from coffee_skill_engine.adapters.counter_table import TinyDBCounterTable
from coffee_skill_engine.bootstrap import (
    build_counter_store_config,
    build_default_service_container,
)
from coffee_skill_engine.core.config import Settings
from coffee_skill_engine.services.counter_store import CounterStore


def _settings(tmp_path: Path) -> Settings:
    return Settings(
        LOG_PSEUDONYM_SECRET="secret",
        DATA_DIR=tmp_path,
        COUNTER_TABLE_NAME="bootstrap_counters",
        MAX_CREATE_RETRIES=3,
        CLEANING_THRESHOLD=25,
    )


def test_counter_store_config_reads_settings(tmp_path: Path) -> None:
    store_config = build_counter_store_config(_settings(tmp_path))

    assert isinstance(store_config.backend, TinyDBCounterTable)
    assert store_config.table_name == "bootstrap_counters"
    assert store_config.max_create_retries == 3


def test_default_container_persists_to_data_dir(tmp_path: Path) -> None:
    services = build_default_service_container(_settings(tmp_path))

    assert services.cleaning_threshold == 25
    assert isinstance(services.counter_store, CounterStore)
    services.counter_store.increment_count("user-1")
    assert (tmp_path / "counters.json").exists()

    reopened = build_default_service_container(_settings(tmp_path))
    assert reopened.counter_store is not None
    assert reopened.counter_store.get_count("user-1") == 1
