"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real settings are used when present.
"""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from dotenv import load_dotenv
from tinydb import TinyDB
from tinydb.storages import MemoryStorage

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Ensure required env vars exist for config import in app (fallbacks only)
os.environ.setdefault("LOG_PSEUDONYM_SECRET", "test-secret")
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="coffee-skill-data-"))
os.environ.setdefault("HEALTHCHECK_API_TOKEN", "health-token")

# pylint: disable=wrong-import-position
from coffee_skill_engine.adapters.counter_table import TinyDBCounterTable  # noqa: E402
from coffee_skill_engine.adapters.localization import LocalizationAdapter  # noqa: E402
from coffee_skill_engine.services import ServiceContainer, build_default_services  # noqa: E402
from coffee_skill_engine.services import runtime  # noqa: E402
from coffee_skill_engine.services.counter_store import (  # noqa: E402
    CounterStore,
    CounterStoreConfig,
)

TEST_TABLE = "test_counters"


@pytest.fixture(name="counter_db")
def _counter_db():
    """In-memory TinyDB so tests never touch DATA_DIR."""
    db = TinyDB(storage=MemoryStorage)
    yield db
    db.close()


@pytest.fixture(name="counter_table")
def _counter_table(counter_db: TinyDB) -> TinyDBCounterTable:
    return TinyDBCounterTable(counter_db)


@pytest.fixture(name="counter_store")
def _counter_store(counter_table: TinyDBCounterTable) -> CounterStore:
    return CounterStore(CounterStoreConfig(backend=counter_table, table_name=TEST_TABLE))


@pytest.fixture(name="localization")
def _localization() -> LocalizationAdapter:
    """Localization that always picks the first variant of list-valued strings."""
    return LocalizationAdapter(chooser=lambda options: options[0])


@pytest.fixture(name="service_container")
def _service_container(
    counter_store: CounterStore, localization: LocalizationAdapter
) -> ServiceContainer:
    container = build_default_services(counter_store=counter_store, localization=localization)
    runtime.set_services(container)
    yield container
    runtime.clear_services()


@pytest.fixture(name="make_envelope")
def _make_envelope() -> Callable[..., dict[str, Any]]:
    """Factory for platform request envelopes."""

    def build(
        request_type: str = "IntentRequest",
        intent_name: Optional[str] = None,
        *,
        user_id: str = "amzn1.ask.account.TEST",
        locale: str = "en-US",
        reason: Optional[str] = None,
        application_id: str = "amzn1.ask.skill.coffee",
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "type": request_type,
            "requestId": "amzn1.echo-api.request.1",
            "locale": locale,
        }
        if intent_name is not None:
            request["intent"] = {"name": intent_name, "confirmationStatus": "NONE", "slots": {}}
        if reason is not None:
            request["reason"] = reason
        return {
            "version": "1.0",
            "session": {
                "new": True,
                "sessionId": "amzn1.echo-api.session.1",
                "application": {"applicationId": application_id},
                "user": {"userId": user_id},
            },
            "context": {
                "System": {
                    "application": {"applicationId": application_id},
                    "user": {"userId": user_id},
                }
            },
            "request": request,
        }

    return build
