"""Core exception types shared across layers."""


class CounterStoreError(Exception):
    """Base class for counter storage failures."""


class AttributeMissingError(CounterStoreError):
    """Raised when an increment targets a record without a ``count`` attribute."""


class ConditionalCheckFailedError(CounterStoreError):
    """Raised when a conditional create finds the counter already present."""


class CounterConflictError(CounterStoreError):
    """Raised when increment-or-create keeps losing races and gives up."""


class CounterBackendError(CounterStoreError):
    """Raised when the storage backend fails for an unexpected reason."""


__all__ = [
    "CounterStoreError",
    "AttributeMissingError",
    "ConditionalCheckFailedError",
    "CounterConflictError",
    "CounterBackendError",
]
