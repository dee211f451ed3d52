"""JSON:API document accumulator."""

from __future__ import annotations

from typing import Any

from jsonapi_encoder.core.elements import LinkRecord, ResourceElement
from jsonapi_encoder.schemas.resource import DocumentLinks

_UNSET = object()


class Document:
    """Accumulate resource elements into a JSON:API v1.1 document.

    Adding an element drains its lazy relationship iterator on the spot, so
    related resources discovered during the drain land in ``included`` while
    the parent is being added. Each element's slot is reserved before the
    drain, which keeps ``data`` and ``included`` in discovery order.
    """

    def __init__(self) -> None:
        self._data: Any = _UNSET
        self._is_collection = False
        self._included: list[dict[str, Any] | None] = []
        self._links: dict[str, str] | None = None
        self._meta: Any = _UNSET

    def set_data_null(self) -> None:
        """Mark primary data as an explicit null."""
        self._data = None
        self._is_collection = False

    def set_data_empty(self) -> None:
        """Mark primary data as an explicit empty collection."""
        self._data = []
        self._is_collection = True

    def add_to_data(self, element: ResourceElement, *, collection: bool = False) -> None:
        """Append a primary resource; ``collection`` forces array output."""
        if not isinstance(self._data, list):
            self._data = []
        if collection:
            self._is_collection = True
        index = len(self._data)
        self._data.append(None)
        self._data[index] = self._build_resource(element)

    def add_to_included(self, element: ResourceElement) -> None:
        """Append a related resource to ``included``."""
        index = len(self._included)
        self._included.append(None)
        self._included[index] = self._build_resource(element)

    def set_meta(self, meta: Any) -> None:
        """Attach top-level meta."""
        self._meta = meta

    def set_links(self, links: DocumentLinks) -> None:
        """Attach the top-level links that are present."""
        self._links = links.model_dump(by_alias=True, exclude_none=True)

    def get_document(self) -> dict[str, Any]:
        """Return the assembled document."""
        if self._data is _UNSET:
            raise ValueError("Document data has not been set.")
        document: dict[str, Any] = {}
        if isinstance(self._data, list) and not self._is_collection:
            document["data"] = self._data[0]
        else:
            document["data"] = self._data
        if self._included:
            document["included"] = list(self._included)
        if self._links:
            document["links"] = dict(self._links)
        if self._meta is not _UNSET:
            document["meta"] = self._meta
        return document

    def _build_resource(self, element: ResourceElement) -> dict[str, Any]:
        resource: dict[str, Any] = {"type": element.type, "id": element.id}
        if element.attributes:
            resource["attributes"] = dict(element.attributes)
        relationships: dict[str, Any] = {}
        for link in element.links:
            relationships[link.name] = self._build_relationship(link)
        if relationships:
            resource["relationships"] = relationships
        if element.self_url is not None:
            resource["links"] = {"self": element.self_url}
        if element.meta is not None:
            resource["meta"] = element.meta
        return resource

    def _build_relationship(self, link: LinkRecord) -> dict[str, Any]:
        if link.is_reference_only:
            return {"links": {"related": link.related_url}}

        relationship: dict[str, Any] = {"data": self._linkage(link)}
        links: dict[str, str] = {}
        if link.self_url is not None:
            links["self"] = link.self_url
        if link.related_url is not None:
            links["related"] = link.related_url
        if links:
            relationship["links"] = links
        if link.meta is not None:
            relationship["meta"] = link.meta
        return relationship

    def _linkage(self, link: LinkRecord) -> Any:
        if link.linkage_ids is None:
            return None
        identifiers = [{"type": link.linkage_type, "id": id_} for id_ in link.linkage_ids]
        if link.is_collection or not identifiers:
            return identifiers
        return identifiers[0]
