"""Core JSON:API document, element and error helpers."""

from .document import Document
from .elements import LinkRecord, ResourceElement
from .errors import (
    EncoderError,
    HeterogeneousCollection,
    InvalidInputShape,
    JSONAPIErrorBuilder,
    MalformedLinkedData,
    RenderError,
    SchemaNotFound,
)

__all__ = [
    "Document",
    "EncoderError",
    "HeterogeneousCollection",
    "InvalidInputShape",
    "JSONAPIErrorBuilder",
    "LinkRecord",
    "MalformedLinkedData",
    "RenderError",
    "ResourceElement",
    "SchemaNotFound",
]
