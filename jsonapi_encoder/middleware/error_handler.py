"""JSON:API error handling middleware."""

import logging
from typing import Any

from jsonapi_encoder.core.errors import EncoderError, JSONAPIErrorBuilder
from jsonapi_encoder.responses import JSONAPIResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert encoder errors into JSON:API error documents."""

    def __init__(self, app: Any, *, error_builder: JSONAPIErrorBuilder | None = None) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = error_builder or JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Serialize encoder failures; other exceptions propagate."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except EncoderError as exc:
            logger.warning("Encoding failed for %s: %s", scope.get("path", ""), exc.detail)
            response = JSONAPIResponse(
                self.error_builder.error_document([self.error_builder.from_exception(exc)]),
                status_code=500,
            )
            await response(scope, receive, send)
