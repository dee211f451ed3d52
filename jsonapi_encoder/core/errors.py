"""Encoder exceptions and JSON:API error object templates."""

from typing import Any


class EncoderError(Exception):
    """Base class for errors raised while encoding a document."""

    code = "encoder_error"
    title = "Encoding failed"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidInputShape(EncoderError):
    """Data is neither None, an object, nor a list of objects."""

    code = "invalid_input_shape"
    title = "Invalid input data"


class HeterogeneousCollection(EncoderError):
    """A primary data collection mixes objects of different types."""

    code = "heterogeneous_collection"
    title = "Mixed resource types in collection"


class SchemaNotFound(EncoderError):
    """No schema provider is registered for an object's type."""

    code = "schema_not_found"
    title = "Schema not found"

    def __init__(self, object_class: type) -> None:
        super().__init__(f"No schema provider registered for {object_class.__qualname__}.")
        self.object_class = object_class


class MalformedLinkedData(EncoderError):
    """Relationship data is neither None, an object, nor a homogeneous list."""

    code = "malformed_linked_data"
    title = "Malformed relationship data"

    def __init__(self, relationship: str, detail: str) -> None:
        super().__init__(f"Relationship '{relationship}': {detail}")
        self.relationship = relationship


class RenderError(EncoderError):
    """The assembled document could not be rendered."""

    code = "render_error"
    title = "Rendering failed"


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_exception(self, exc: EncoderError, *, status: str = "500") -> dict[str, Any]:
        """Return a JSON:API error object describing an encoder error."""
        return self.error_object(
            status=status,
            code=exc.code,
            title=exc.title,
            detail=exc.detail,
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        if not errors:
            raise ValueError("Error document must include at least one error.")
        return {"errors": errors}
