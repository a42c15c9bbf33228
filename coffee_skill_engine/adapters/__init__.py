"""Infrastructure adapter exports."""

from coffee_skill_engine.core.exceptions import (  # noqa: F401
    AttributeMissingError,
    ConditionalCheckFailedError,
    CounterBackendError,
)

from .counter_table import TinyDBCounterTable, open_counter_db
from .localization import LocalizationAdapter

__all__ = [
    "LocalizationAdapter",
    "TinyDBCounterTable",
    "open_counter_db",
    "AttributeMissingError",
    "ConditionalCheckFailedError",
    "CounterBackendError",
]
