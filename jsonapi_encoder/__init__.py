"""Encode object graphs as JSON:API v1.1 documents."""

from .core.document import Document
from .core.errors import (
    EncoderError,
    HeterogeneousCollection,
    InvalidInputShape,
    JSONAPIErrorBuilder,
    MalformedLinkedData,
    RenderError,
    SchemaNotFound,
)
from .encoder.base import Encoder
from .renderers.options import EncodeOptions
from .schemas.container import SchemaContainer
from .schemas.links import LinkDescriptor
from .schemas.provider import SchemaProvider
from .schemas.resource import DocumentLinks

__all__ = [
    "Document",
    "DocumentLinks",
    "EncodeOptions",
    "Encoder",
    "EncoderError",
    "HeterogeneousCollection",
    "InvalidInputShape",
    "JSONAPIErrorBuilder",
    "LinkDescriptor",
    "MalformedLinkedData",
    "RenderError",
    "SchemaContainer",
    "SchemaNotFound",
    "SchemaProvider",
]
