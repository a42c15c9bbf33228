"""Tests for the info and liveness routes."""
# pylint: disable=missing-function-docstring,redefined-outer-name

from http import HTTPStatus

import pytest
from fastapi.testclient import TestClient

from coffee_skill_engine import COFFEE_SKILL_VERSION
from coffee_skill_engine.apps.api.app import create_app
from coffee_skill_engine.core import config as config_module
from coffee_skill_engine.core.exceptions import CounterBackendError
from coffee_skill_engine.services import ServiceContainer, build_default_services
from coffee_skill_engine.services.counter_store import CounterStore, CounterStoreConfig

AUTH = {"Authorization": "Bearer health-token"}


class UnreachableTable:
    """Counter table whose reads always fail."""

    def get_item(self, table, key):
        raise CounterBackendError(f"cannot reach {table}")


@pytest.fixture
def client(service_container: ServiceContainer, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(config_module.config, "ENABLE_HEALTHCHECK_AUTH", True)
    monkeypatch.setattr(config_module.config, "HEALTHCHECK_API_TOKEN", "health-token")
    return TestClient(create_app(service_container))


def test_root_describes_the_skill(client: TestClient) -> None:
    resp = client.get("/")

    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == {
        "skill": "coffee-skill-engine",
        "version": COFFEE_SKILL_VERSION,
        "webhook": "/alexa",
        "locales": ["de", "en"],
        "cleaning_threshold": 40,
    }


def test_alive_reads_the_counter_table(client: TestClient, service_container) -> None:
    resp = client.get("/alive", headers=AUTH)

    assert resp.status_code == HTTPStatus.OK
    assert resp.json() == {"status": "ok", "counter_store": "reachable"}
    assert service_container.counter_store.get_counter_details("healthcheck").count == 0


@pytest.mark.usefixtures("service_container")
def test_alive_reports_unreachable_store(localization, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module.config, "ENABLE_HEALTHCHECK_AUTH", False)
    store = CounterStore(CounterStoreConfig(backend=UnreachableTable(), table_name="t"))
    client = TestClient(
        create_app(build_default_services(counter_store=store, localization=localization))
    )

    resp = client.get("/alive")

    assert resp.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    assert resp.json()["counter_store"] == "unreachable"


def test_alive_requires_token(client: TestClient) -> None:
    assert client.get("/alive").status_code == HTTPStatus.UNAUTHORIZED
    assert (
        client.get("/alive", headers={"Authorization": "Bearer wrong"}).status_code
        == HTTPStatus.UNAUTHORIZED
    )
    assert client.get("/alive", headers={"X-Admin-Token": "health-token"}).status_code == (
        HTTPStatus.OK
    )


def test_alive_open_when_auth_disabled(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(config_module.config, "ENABLE_HEALTHCHECK_AUTH", False)

    assert client.get("/alive").status_code == HTTPStatus.OK


def test_create_app_requires_services() -> None:
    with pytest.raises(RuntimeError):
        create_app(None)
