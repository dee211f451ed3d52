"""Encoder turning object graphs into JSON:API documents."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from numbers import Number
from typing import Any, Iterator, Mapping, Sequence

from jsonapi_encoder.core.document import Document
from jsonapi_encoder.core.elements import LinkRecord, ResourceElement
from jsonapi_encoder.core.errors import (
    HeterogeneousCollection,
    InvalidInputShape,
    MalformedLinkedData,
)
from jsonapi_encoder.renderers.json import JsonRenderer
from jsonapi_encoder.renderers.options import EncodeOptions
from jsonapi_encoder.schemas.container import ProviderSource, SchemaContainer
from jsonapi_encoder.schemas.links import LinkDescriptor
from jsonapi_encoder.schemas.provider import SchemaProvider
from jsonapi_encoder.schemas.resource import DocumentLinks

logger = logging.getLogger(__name__)

_NON_RESOURCE_TYPES = (str, bytes, bytearray, Number, Mapping, set, frozenset)


def _is_resource_object(value: Any) -> bool:
    return value is not None and not isinstance(value, (list, tuple) + _NON_RESOURCE_TYPES)


def _join_url(base: str | None, sub_url: str | None) -> str | None:
    if base is None:
        return None
    return f"{base}{sub_url or ''}"


class Encoder:
    """Encode objects, lists of objects or ``None`` as JSON:API documents.

    Relationships are walked depth first in the order each schema declares
    them. The current relationship path is tracked on a stack whose length is
    compared with the owning schema's include depth, which bounds recursion on
    cyclic graphs. The same resource may appear in ``included`` more than once
    when it is reachable through several paths.
    """

    def __init__(
        self,
        container: SchemaContainer,
        encode_options: EncodeOptions | None = None,
    ) -> None:
        self.container = container
        self.renderer = JsonRenderer(encode_options)
        self._link_stack: list[str] | None = None

    @classmethod
    def instance(
        cls,
        schemas: Mapping[type, ProviderSource],
        encode_options: EncodeOptions | None = None,
    ) -> Encoder:
        """Create an encoder from a ``{class: provider}`` mapping."""
        if not schemas:
            raise ValueError("Schema providers should be specified.")
        return cls(SchemaContainer(schemas), encode_options)

    def encode(
        self,
        data: Any,
        links: DocumentLinks | Mapping[str, str | None] | None = None,
        meta: Any = None,
        options: EncodeOptions | None = None,
    ) -> str:
        """Encode ``data`` and render the document as JSON text."""
        document = self.encode_to_document(data, links=links, meta=meta)
        return self.renderer.render(document, options)

    def encode_to_document(
        self,
        data: Any,
        links: DocumentLinks | Mapping[str, str | None] | None = None,
        meta: Any = None,
    ) -> dict[str, Any]:
        """Encode ``data`` and return the assembled document dict."""
        self._check_data(data)
        document = Document()
        self._link_stack = []
        try:
            if meta is not None:
                document.set_meta(meta)
            if links is not None:
                document.set_links(self._document_links(links))
            self._process_data(document, data)
        finally:
            self._link_stack = None
        return document.get_document()

    def _document_links(self, links: DocumentLinks | Mapping[str, str | None]) -> DocumentLinks:
        if isinstance(links, DocumentLinks):
            return links
        return DocumentLinks.model_validate(links)

    def _check_data(self, data: Any) -> None:
        if data is None or _is_resource_object(data):
            return
        if not isinstance(data, (list, tuple)):
            raise InvalidInputShape(
                f"Expected None, an object or a list of objects, got {type(data).__name__}."
            )
        for index, item in enumerate(data):
            if not _is_resource_object(item):
                raise InvalidInputShape(
                    f"Item {index} of primary data is {type(item).__name__}, not a resource object."
                )
        if data:
            first_class = type(data[0])
            for index, item in enumerate(data):
                if type(item) is not first_class:
                    raise HeterogeneousCollection(
                        f"Item {index} is {type(item).__qualname__}; "
                        f"all resource objects should be {first_class.__qualname__}."
                    )

    def _process_data(self, document: Document, data: Any) -> None:
        if data is None:
            logger.debug("Encoding null primary data")
            document.set_data_null()
        elif isinstance(data, (list, tuple)):
            if not data:
                logger.debug("Encoding empty primary data")
                document.set_data_empty()
                return
            schema = self.container.get_schema(data[0])
            logger.debug(
                "Encoding %d %s resources", len(data), schema.get_resource_type()
            )
            for resource in data:
                document.add_to_data(
                    self._convert_to_element(document, resource, schema),
                    collection=True,
                )
        else:
            schema = self.container.get_schema(data)
            logger.debug("Encoding single %s resource", schema.get_resource_type())
            document.add_to_data(self._convert_to_element(document, data, schema))

    def _convert_to_element(
        self, document: Document, resource: Any, schema: SchemaProvider
    ) -> ResourceElement:
        self_url = schema.get_self_url(resource)
        return ResourceElement(
            schema.get_resource_type(),
            schema.get_id(resource),
            schema.get_attributes(resource),
            self_url,
            self._iter_links(document, resource, self_url, schema),
            schema.get_meta(resource),
        )

    @contextmanager
    def _descend(self, name: str) -> Iterator[int]:
        if self._link_stack is None:
            raise RuntimeError("Relationships can only be traversed during encode().")
        stack = self._link_stack
        stack.append(name)
        try:
            yield len(stack)
        finally:
            stack.pop()

    def _iter_links(
        self,
        document: Document,
        resource: Any,
        resource_self_url: str | None,
        schema: SchemaProvider,
    ) -> Iterator[LinkRecord]:
        for link in schema.get_links(resource):
            with self._descend(link.name) as depth:
                if depth > schema.get_include_depth():
                    logger.debug(
                        "Skipping relationship %s: depth %d exceeds %s include depth %d",
                        ".".join(self._link_stack or ()),
                        depth,
                        schema.get_resource_type(),
                        schema.get_include_depth(),
                    )
                    continue

                if link.show_as_reference:
                    if resource_self_url is None:
                        raise MalformedLinkedData(
                            link.name,
                            "reference links need the owning resource's self URL.",
                        )
                    yield LinkRecord.reference(
                        link.name, _join_url(resource_self_url, link.related_sub_url)
                    )
                    continue

                record, linkage_schema = self._create_link(resource_self_url, link)
                yield record

                if not link.should_be_included or linkage_schema is None:
                    continue

                for linked in self._as_sequence(link.linked_data):
                    included_links = self._iter_links(
                        document,
                        linked,
                        linkage_schema.get_self_url(linked),
                        linkage_schema,
                    )
                    document.add_to_included(
                        self._create_included_element(
                            schema, linkage_schema, linked, included_links
                        )
                    )

    def _as_sequence(self, linked_data: Any) -> Sequence[Any]:
        if isinstance(linked_data, (list, tuple)):
            return linked_data
        return [linked_data]

    def _create_link(
        self, resource_self_url: str | None, link: LinkDescriptor
    ) -> tuple[LinkRecord, SchemaProvider | None]:
        linked_data = link.linked_data
        linkage_schema: SchemaProvider | None = None
        linkage_type: str | None = None
        linkage_ids: list[str] | None = None
        is_collection = isinstance(linked_data, (list, tuple))

        if linked_data is None:
            pass
        elif is_collection:
            linkage_ids = []
            if linked_data:
                linkage_schema = self._collection_schema(link.name, linked_data)
        elif _is_resource_object(linked_data):
            linkage_schema = self.container.get_schema(linked_data)
        else:
            raise MalformedLinkedData(
                link.name, f"unsupported linked data of type {type(linked_data).__name__}."
            )

        if linkage_schema is not None:
            linkage_type = linkage_schema.get_resource_type()
            linkage_ids = linkage_schema.get_ids(linked_data)

        meta = None
        if link.show_meta and linkage_schema is not None:
            meta = linkage_schema.get_meta(linked_data)

        record = LinkRecord(
            link.name,
            linkage_type=linkage_type,
            linkage_ids=linkage_ids,
            is_collection=is_collection,
            self_url=_join_url(resource_self_url, link.self_sub_url) if link.show_self else None,
            related_url=_join_url(resource_self_url, link.related_sub_url) if link.show_related else None,
            meta=meta,
        )
        return record, linkage_schema

    def _collection_schema(self, name: str, linked_data: Sequence[Any]) -> SchemaProvider:
        first_class = type(linked_data[0])
        for item in linked_data:
            if not _is_resource_object(item):
                raise MalformedLinkedData(
                    name, f"collection item of type {type(item).__name__} is not a resource object."
                )
            if type(item) is not first_class:
                raise MalformedLinkedData(
                    name,
                    f"collection mixes {first_class.__qualname__} and {type(item).__qualname__}.",
                )
        return self.container.get_schema(linked_data[0])

    def _create_included_element(
        self,
        schema: SchemaProvider,
        linkage_schema: SchemaProvider,
        resource: Any,
        links: Iterator[LinkRecord],
    ) -> ResourceElement:
        return ResourceElement(
            linkage_schema.get_resource_type(),
            linkage_schema.get_id(resource),
            linkage_schema.get_attributes(resource),
            linkage_schema.get_self_url(resource) if schema.is_show_self_in_included() else None,
            links,
            linkage_schema.get_meta(resource) if schema.is_show_meta_in_included() else None,
        )
