"""Starlette response carrying a JSON:API document."""

from __future__ import annotations

from typing import Any, Mapping

from starlette.background import BackgroundTask
from starlette.responses import Response

from jsonapi_encoder.renderers.json import JsonRenderer
from jsonapi_encoder.renderers.options import EncodeOptions

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(Response):
    """Render an assembled document with the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        background: BackgroundTask | None = None,
        *,
        options: EncodeOptions | None = None,
    ) -> None:
        self.renderer = JsonRenderer(options)
        super().__init__(content, status_code, headers, None, background)

    def render(self, content: Any) -> bytes:
        if isinstance(content, (bytes, str)):
            return content.encode("utf-8") if isinstance(content, str) else content
        return self.renderer.render(content).encode("utf-8")
