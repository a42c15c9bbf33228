"""Per-user coffee counter state on top of a conditional-write key-value table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from coffee_skill_engine.core.exceptions import (
    AttributeMissingError,
    ConditionalCheckFailedError,
    CounterConflictError,
)
from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.core.models import CounterDetails
from coffee_skill_engine.core.ports import CounterStorePort, CounterTablePort

logger = get_logger(__name__)

COUNT_ATTRIBUTE = "count"
LAST_MAINTENANCE_ATTRIBUTE = "lastMaintenance"


@dataclass(frozen=True, slots=True)
class CounterStoreConfig:
    """Everything a CounterStore needs to reach its table."""

    backend: CounterTablePort
    table_name: str
    max_create_retries: int = 1


def _details_from_item(item: Optional[Mapping[str, Any]]) -> CounterDetails:
    if not item:
        return CounterDetails()
    return CounterDetails(
        count=int(item.get(COUNT_ATTRIBUTE) or 0),
        last_maintenance=int(item.get(LAST_MAINTENANCE_ATTRIBUTE) or 0),
    )


class CounterStore(CounterStorePort):
    """Read, increment, and checkpoint ``UserCounter`` records.

    Missing records read as zero. Increments go through the table's conditional
    primitives: update-if-present first, then create-if-absent, then one more
    update when another writer won the create.
    """

    def __init__(self, config: CounterStoreConfig) -> None:
        self._config = config

    @property
    def table_name(self) -> str:
        """Name of the backing table."""
        return self._config.table_name

    def _get_item(self, user_id: str) -> Optional[Mapping[str, Any]]:
        try:
            return self._config.backend.get_item(self._config.table_name, user_id)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("error reading counter: %s", exc)
            raise

    def get_count(self, user_id: str) -> int:
        return _details_from_item(self._get_item(user_id)).count

    def get_counter_details(self, user_id: str) -> CounterDetails:
        return _details_from_item(self._get_item(user_id))

    def increment_count(self, user_id: str) -> CounterDetails:
        backend = self._config.backend
        table = self._config.table_name
        retries_left = self._config.max_create_retries
        while True:
            try:
                updated = backend.increment_existing(table, user_id, COUNT_ATTRIBUTE, 1)
                return _details_from_item(updated)
            except AttributeMissingError:
                logger.info("no counter stored yet; creating one")
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("error updating count: %s", exc)
                raise

            try:
                created = backend.create_if_absent(
                    table,
                    user_id,
                    COUNT_ATTRIBUTE,
                    {COUNT_ATTRIBUTE: 1},
                    {LAST_MAINTENANCE_ATTRIBUTE: 0},
                )
                return _details_from_item(created)
            except ConditionalCheckFailedError as exc:
                if retries_left <= 0:
                    logger.error("counter create kept conflicting; giving up")
                    raise CounterConflictError(
                        "counter was created concurrently and the retry budget is spent"
                    ) from exc
                retries_left -= 1
                logger.info("counter created concurrently; retrying increment")
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("error creating count: %s", exc)
                raise

    def record_maintenance(self, user_id: str, count: int) -> None:
        # Not atomic with the read that produced ``count``; an increment may land in between.
        try:
            self._config.backend.set_attribute(
                self._config.table_name, user_id, LAST_MAINTENANCE_ATTRIBUTE, int(count)
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("error marking last maintenance: %s", exc)
            raise


__all__ = [
    "CounterStore",
    "CounterStoreConfig",
    "COUNT_ATTRIBUTE",
    "LAST_MAINTENANCE_ATTRIBUTE",
]
