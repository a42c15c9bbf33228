"""Entry point for request-triggered function hosts.

The host calls ``handler(event, context)`` once per platform request. The
service container is built on the first invocation and reused while the host
keeps the process warm; no request state lives in it.
"""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

from coffee_skill_engine.bootstrap import build_default_service_container
from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.services import ServiceContainer, runtime
from coffee_skill_engine.services.request_pipeline import process_envelope

logger = get_logger(__name__)


def _services() -> ServiceContainer:
    try:
        return runtime.get_services()
    except RuntimeError:
        logger.info("building service container for cold start")
        container = build_default_service_container()
        runtime.set_services(container)
        return container


def handle_event(
    event: Mapping[str, Any], services: Optional[ServiceContainer] = None
) -> dict[str, Any]:
    """Process one platform request envelope synchronously.

    Logging context, including the correlation id taken from
    ``request.requestId``, is bound by the request pipeline as on the web path.
    """
    return asyncio.run(process_envelope(event, services or _services()))


def handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    """Host-facing signature; ``context`` is unused."""
    _ = context
    return handle_event(event)


__all__ = ["handle_event", "handler"]
