"""Render assembled documents as JSON text."""

from __future__ import annotations

import json
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from jsonapi_encoder.core.errors import RenderError
from jsonapi_encoder.renderers.options import EncodeOptions


def _nesting_depth(value: Any) -> int:
    depth = 0
    stack = [(value, 1)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children)
    return depth


class JsonRenderer:
    """Serialize a document dict using ``json.dumps``."""

    def __init__(self, options: EncodeOptions | None = None) -> None:
        self.options = EncodeOptions() if options is None else options

    def to_jsonable(self, document: Any) -> Any:
        """Return ``document`` with non-JSON values converted."""
        try:
            return to_jsonable_python(document)
        except PydanticSerializationError as exc:
            raise RenderError(str(exc)) from exc

    def render(self, document: Any, options: EncodeOptions | None = None) -> str:
        """Return the textual JSON for ``document``."""
        if options is None:
            options = self.options
        payload = self.to_jsonable(document)
        if options.max_depth is not None and _nesting_depth(payload) > options.max_depth:
            raise RenderError(f"Document nesting exceeds maximum depth {options.max_depth}.")
        return json.dumps(
            payload,
            indent=options.indent,
            sort_keys=options.sort_keys,
            ensure_ascii=options.ensure_ascii,
            separators=options.separators,
        )
