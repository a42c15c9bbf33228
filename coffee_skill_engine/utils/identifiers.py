"""Pseudonyms for voice platform user ids in logs.

A platform user id is stable for one account and one skill, so it points to a
person as surely as a name does. Logs carry a keyed digest of it instead.
Rotating ``LOG_PSEUDONYM_SECRET`` unlinks old log lines from new ones.
"""

from __future__ import annotations

import hashlib
import hmac
import os
from functools import lru_cache
from typing import Optional

PSEUDONYM_LENGTH = 16


class UserPseudonymizer:
    """Keyed, memoized mapping from platform user ids to short log tokens."""

    def __init__(self, secret: str, length: int = PSEUDONYM_LENGTH) -> None:
        if not secret:
            raise ValueError("pseudonym secret must not be empty")
        self._key = secret.encode("utf-8")
        self._length = length
        self._tokens = lru_cache(maxsize=4096)(self._digest)

    def _digest(self, user_id: str) -> str:
        mac = hmac.new(self._key, user_id.encode("utf-8"), hashlib.sha256)
        return mac.hexdigest()[: self._length]

    def __call__(self, user_id: str) -> str:
        return self._tokens(user_id)


@lru_cache(maxsize=8)
def pseudonymizer_for(secret: str) -> UserPseudonymizer:
    """Return the shared pseudonymizer for ``secret``."""
    return UserPseudonymizer(secret)


def get_log_safe_user_id(user_id: str, *, secret: Optional[str] = None) -> str:
    """Return the log token for ``user_id``.

    ``secret`` defaults to the ``LOG_PSEUDONYM_SECRET`` environment variable.
    """
    resolved = secret or os.environ.get("LOG_PSEUDONYM_SECRET")
    if not resolved:
        raise RuntimeError("LOG_PSEUDONYM_SECRET environment variable must be set.")
    return pseudonymizer_for(resolved)(user_id)


def clear_log_safe_user_cache() -> None:
    """Drop every cached pseudonymizer, e.g. after a secret rotation."""
    pseudonymizer_for.cache_clear()


__all__ = [
    "PSEUDONYM_LENGTH",
    "UserPseudonymizer",
    "clear_log_safe_user_cache",
    "get_log_safe_user_id",
    "pseudonymizer_for",
]
