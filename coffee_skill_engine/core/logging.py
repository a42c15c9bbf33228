"""Structured JSON logging bound to the skill request being handled.

Every record carries the fields of the active ``SkillLogContext``: the
platform's ``request.requestId`` as ``cid``, the HTTP transport id when the
request came through the web app, the pseudonymized user, and the request
type and intent once the envelope has been parsed. Unbound fields render
as ``-``.
"""

from __future__ import annotations

import logging
import sys
import tempfile
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from coffee_skill_engine.core.config import settings

UNBOUND = "-"
LOG_SCHEMA_VERSION = "1.1.0"
LOG_FILE_NAME = "coffee_skill.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

LEVEL_NAME = str(getattr(settings, "COFFEE_SKILL_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)


@dataclass(frozen=True, slots=True)
class SkillLogContext:
    """Request-scoped values stamped onto every log record."""

    correlation_id: Optional[str] = None
    http_request_id: Optional[str] = None
    log_user_id: Optional[str] = None
    request_type: Optional[str] = None
    intent: Optional[str] = None

    def record_fields(self) -> dict[str, str]:
        """Return the context as log record attributes."""
        return {f.name: getattr(self, f.name) or UNBOUND for f in fields(self)}


_log_context: ContextVar[SkillLogContext] = ContextVar(
    "skill_log_context", default=SkillLogContext()
)


def current_log_context() -> SkillLogContext:
    """Return the context bound for the running task."""
    return _log_context.get()


def get_correlation_id() -> Optional[str]:
    """Return the platform request id of the request being handled, if any."""
    return _log_context.get().correlation_id


@contextmanager
def log_context(**values: Optional[str]) -> Iterator[SkillLogContext]:
    """Overlay ``values`` on the active context for the duration of the block.

    ``None`` leaves the outer value in place, so an inner block can add the
    intent without losing the transport id bound by the middleware.
    """
    updates = {name: value for name, value in values.items() if value is not None}
    bound = replace(_log_context.get(), **updates)
    token = _log_context.set(bound)
    try:
        yield bound
    finally:
        _log_context.reset(token)


def resolve_logs_dir(app_settings: Any) -> Optional[Path]:
    """Return the first writable logs directory, or ``None`` for stdout only.

    Candidates: ``COFFEE_SKILL_LOG_DIR``, then ``DATA_DIR/logs``, then a
    directory under the system temp dir.
    """
    candidates: list[Path] = []
    configured = getattr(app_settings, "COFFEE_SKILL_LOG_DIR", None)
    if configured:
        candidates.append(Path(configured))
    candidates.append(Path(getattr(app_settings, "DATA_DIR", "/data")) / "logs")
    candidates.append(Path(tempfile.gettempdir()) / "coffee-skill-logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate
    return None


LOGS_DIR = resolve_logs_dir(settings)
LOG_FILE_PATH: Optional[Path] = LOGS_DIR / LOG_FILE_NAME if LOGS_DIR else None


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class SkillContextFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Copy the active SkillLogContext onto records that lack the fields."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name, value in current_log_context().record_fields().items():
            record.__dict__.setdefault(name, value)
        return True


_context_filter = SkillContextFilter()


def build_formatter() -> VersionedJsonFormatter:
    """Return the JSON formatter shared by every handler."""
    return VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(http_request_id)s",
                "%(log_user_id)s",
                "%(request_type)s",
                "%(intent)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "log_user_id": "user",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )


@lru_cache(maxsize=1)
def shared_handlers() -> tuple[logging.Handler, ...]:
    """Create the stdout and rotating-file handlers once per process."""
    formatter = build_formatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if LOG_FILE_PATH is not None:
        handlers.append(
            RotatingFileHandler(
                LOG_FILE_PATH,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.addFilter(_context_filter)
        handler.setFormatter(formatter)
    return tuple(handlers)


def get_logger(name: str) -> logging.Logger:
    """Return a logger that writes context-stamped JSON."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    # On the logger too, so records reaching ancestor handlers carry the fields.
    if _context_filter not in logger.filters:
        logger.addFilter(_context_filter)
    for handler in shared_handlers():
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger


__all__ = [
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
    "SkillContextFilter",
    "SkillLogContext",
    "current_log_context",
    "get_correlation_id",
    "get_logger",
    "log_context",
    "resolve_logs_dir",
    "shared_handlers",
]
