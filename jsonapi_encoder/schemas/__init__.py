"""Schema providers and pydantic models for JSON:API."""

from .container import SchemaContainer
from .links import LinkDescriptor
from .provider import SchemaProvider
from .resource import (
    DocumentLinks,
    JSONAPIDocument,
    JSONAPIErrorDocument,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "DocumentLinks",
    "JSONAPIDocument",
    "JSONAPIErrorDocument",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "LinkDescriptor",
    "SchemaContainer",
    "SchemaProvider",
]
