"""Priority-ordered dispatch of skill requests to request and error handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol, Sequence

from coffee_skill_engine.core.logging import get_logger
from coffee_skill_engine.core.models import SkillRequest, SkillResponse

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer

logger = get_logger(__name__)

# pylint: disable=unnecessary-ellipsis


class RequestHandler(Protocol):
    """Handler contract: a pure capability check plus an async handle step."""

    def can_handle(self, request: SkillRequest) -> bool:
        """Return True when this handler claims ``request``."""
        ...

    async def handle(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        """Produce the response for ``request``."""
        ...


class ErrorHandler(Protocol):
    """Handler consulted when request handling raises."""

    def can_handle(self, request: SkillRequest, error: Exception) -> bool:
        """Return True when this handler claims ``error``."""
        ...

    async def handle(
        self, request: SkillRequest, error: Exception, services: "ServiceContainer"
    ) -> SkillResponse:
        """Produce a response that replaces the failed one."""
        ...


class DispatchError(RuntimeError):
    """Base error for dispatcher failures."""


class HandlerNotFoundError(DispatchError):
    """Raised when no request handler claims a request."""


class IntentDispatcher:
    """Route each request to the first capable handler in registration order."""

    def __init__(
        self,
        handlers: Iterable[RequestHandler] | None = None,
        error_handlers: Iterable[ErrorHandler] | None = None,
    ) -> None:
        self._handlers: list[RequestHandler] = list(handlers or [])
        self._error_handlers: list[ErrorHandler] = list(error_handlers or [])

    def register(self, handler: RequestHandler) -> None:
        """Append ``handler`` at the lowest priority."""

        self._handlers.append(handler)

    def register_error_handler(self, handler: ErrorHandler) -> None:
        """Append an error handler at the lowest priority."""

        self._error_handlers.append(handler)

    def resolve(self, request: SkillRequest) -> RequestHandler:
        """Return the highest-priority handler claiming ``request``."""

        for handler in self._handlers:
            if handler.can_handle(request):
                return handler
        raise HandlerNotFoundError(
            f"No handler registered for {request.request_type} ({request.intent_name})"
        )

    async def dispatch(self, request: SkillRequest, services: "ServiceContainer") -> SkillResponse:
        """Handle ``request``, routing any failure through the error handlers."""

        try:
            handler = self.resolve(request)
            logger.info(
                "dispatching request",
                extra={"handler": type(handler).__name__},
            )
            return await handler.handle(request, services)
        except Exception as exc:  # pylint: disable=broad-except
            for error_handler in self._error_handlers:
                if error_handler.can_handle(request, exc):
                    return await error_handler.handle(request, exc, services)
            raise

    def handlers(self) -> Sequence[RequestHandler]:
        """Return the request handlers in priority order."""

        return tuple(self._handlers)

    def error_handlers(self) -> Sequence[ErrorHandler]:
        """Return the error handlers in priority order."""

        return tuple(self._error_handlers)


__all__ = [
    "DispatchError",
    "ErrorHandler",
    "HandlerNotFoundError",
    "IntentDispatcher",
    "RequestHandler",
]
