"""ASGI middleware for the skill's web app."""

from __future__ import annotations

import time
import uuid

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from coffee_skill_engine.core.logging import get_logger, log_context

logger = get_logger(__name__)


class RequestIdMiddleware:  # pylint: disable=too-few-public-methods
    """Tag every HTTP exchange with a transport request id.

    The id is taken from ``X-Request-ID`` when the caller sends one and is
    generated otherwise. It is echoed on the response and logged as
    ``http_request_id``. The correlation id of skill logs is the envelope's
    own ``request.requestId``, bound later by the request pipeline.
    """

    header = "X-Request-ID"

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(self.header) or uuid.uuid4().hex
        outcome: dict[str, int] = {}

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                outcome["status"] = message["status"]
                MutableHeaders(scope=message).setdefault(self.header, request_id)
            await send(message)

        started = time.perf_counter()
        with log_context(http_request_id=request_id):
            try:
                await self.app(scope, receive, send_with_request_id)
            finally:
                logger.info(
                    "http exchange finished",
                    extra={
                        "method": scope.get("method", ""),
                        "path": scope.get("path", ""),
                        "status_code": outcome.get("status", 500),
                        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                    },
                )


__all__ = ["RequestIdMiddleware"]
