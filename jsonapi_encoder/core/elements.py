"""Transient values passed from the encoder to the document."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence


class LinkRecord:
    """One relationship of a resource as it will appear in the document.

    A reference-only record carries nothing but ``related_url``. Otherwise
    ``linkage_ids`` is ``None`` for a null relationship, an empty list for an
    empty to-many relationship, or the ordered ids of the linked objects.
    """

    __slots__ = (
        "name",
        "is_reference_only",
        "linkage_type",
        "linkage_ids",
        "is_collection",
        "self_url",
        "related_url",
        "meta",
    )

    def __init__(
        self,
        name: str,
        *,
        is_reference_only: bool = False,
        linkage_type: str | None = None,
        linkage_ids: Sequence[str] | None = None,
        is_collection: bool = False,
        self_url: str | None = None,
        related_url: str | None = None,
        meta: Any = None,
    ) -> None:
        if is_reference_only and (linkage_type is not None or linkage_ids is not None):
            raise ValueError("Reference-only links cannot carry linkage.")
        self.name = name
        self.is_reference_only = is_reference_only
        self.linkage_type = linkage_type
        self.linkage_ids = None if linkage_ids is None else list(linkage_ids)
        self.is_collection = is_collection
        self.self_url = self_url
        self.related_url = related_url
        self.meta = meta

    @classmethod
    def reference(cls, name: str, related_url: str) -> LinkRecord:
        """Return a link shown only as a related URL."""
        if related_url is None:
            raise ValueError("Reference links need a related URL.")
        return cls(name, is_reference_only=True, related_url=related_url)

    def __repr__(self) -> str:
        return (
            f"LinkRecord(name={self.name!r}, is_reference_only={self.is_reference_only!r}, "
            f"linkage_type={self.linkage_type!r}, linkage_ids={self.linkage_ids!r})"
        )


class ResourceElement:
    """A resource object whose relationships are produced lazily."""

    __slots__ = ("type", "id", "attributes", "self_url", "links", "meta")

    def __init__(
        self,
        type_: str,
        id_: str,
        attributes: Mapping[str, Any],
        self_url: str | None,
        links: Iterator[LinkRecord],
        meta: Any = None,
    ) -> None:
        self.type = type_
        self.id = id_
        self.attributes = attributes
        self.self_url = self_url
        self.links = links
        self.meta = meta

    def __repr__(self) -> str:
        return f"ResourceElement(type={self.type!r}, id={self.id!r})"
