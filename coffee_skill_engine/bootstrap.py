"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from typing import Optional

from coffee_skill_engine.adapters.counter_table import TinyDBCounterTable, open_counter_db
from coffee_skill_engine.adapters.localization import LocalizationAdapter
from coffee_skill_engine.core.config import Settings, settings
from coffee_skill_engine.services import ServiceContainer, build_default_services
from coffee_skill_engine.services.counter_store import CounterStore, CounterStoreConfig


def build_counter_store_config(app_settings: Optional[Settings] = None) -> CounterStoreConfig:
    """Return the store configuration for the TinyDB table under ``DATA_DIR``."""

    resolved = app_settings or settings
    return CounterStoreConfig(
        backend=TinyDBCounterTable(open_counter_db(resolved.DATA_DIR)),
        table_name=resolved.COUNTER_TABLE_NAME,
        max_create_retries=resolved.MAX_CREATE_RETRIES,
    )


def build_default_service_container(app_settings: Optional[Settings] = None) -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    resolved = app_settings or settings
    return build_default_services(
        counter_store=CounterStore(build_counter_store_config(resolved)),
        localization=LocalizationAdapter(default_locale=resolved.DEFAULT_LOCALE),
        cleaning_threshold=resolved.CLEANING_THRESHOLD,
    )


__all__ = ["build_counter_store_config", "build_default_service_container"]
