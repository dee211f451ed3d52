"""Registry resolving schema providers by runtime type."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Union

from jsonapi_encoder.core.errors import SchemaNotFound
from jsonapi_encoder.schemas.provider import SchemaProvider

logger = logging.getLogger(__name__)

ProviderSource = Union[SchemaProvider, type, Callable[[], SchemaProvider]]


class SchemaContainer:
    """Map Python classes to schema providers.

    A registration may be a provider instance, a provider class, or a
    zero-argument factory. Classes and factories are instantiated on first
    lookup and the provider is kept for the lifetime of the container.
    """

    def __init__(self, schemas: Mapping[type, ProviderSource] | None = None) -> None:
        self._sources: dict[type, ProviderSource] = {}
        self._providers: dict[type, SchemaProvider] = {}
        for object_class, source in (schemas or {}).items():
            self.register(object_class, source)

    def register(self, object_class: type, source: ProviderSource) -> None:
        """Register a provider for ``object_class``, replacing any previous one."""
        if not isinstance(object_class, type):
            raise TypeError(f"Expected a class, got {object_class!r}.")
        self._sources[object_class] = source
        self._providers.pop(object_class, None)

    def has_schema(self, instance: Any) -> bool:
        """Return True if a provider is registered for ``instance``'s class."""
        return type(instance) in self._sources

    def get_schema(self, instance: Any) -> SchemaProvider:
        """Return the provider for ``instance``'s exact runtime type."""
        return self.get_schema_by_type(type(instance))

    def get_schema_by_type(self, object_class: type) -> SchemaProvider:
        """Return the provider registered for ``object_class``."""
        provider = self._providers.get(object_class)
        if provider is not None:
            return provider
        try:
            source = self._sources[object_class]
        except KeyError:
            raise SchemaNotFound(object_class) from None
        provider = self._create_provider(source)
        logger.debug(
            "Resolved schema %s for %s",
            type(provider).__name__,
            object_class.__qualname__,
        )
        self._providers[object_class] = provider
        return provider

    def _create_provider(self, source: ProviderSource) -> SchemaProvider:
        if isinstance(source, SchemaProvider):
            return source
        provider = source()
        if not isinstance(provider, SchemaProvider):
            raise TypeError(f"{source!r} did not produce a SchemaProvider.")
        return provider
