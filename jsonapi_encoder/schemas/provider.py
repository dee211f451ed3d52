"""Base schema provider describing how a class maps to a resource."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from jsonapi_encoder.schemas.links import LinkDescriptor


class SchemaProvider:
    """Map instances of one class to JSON:API resource objects.

    Subclasses configure the resource through ``Meta`` and override
    :meth:`get_links` (and :meth:`get_meta` when needed)::

        class ArticleSchema(SchemaProvider):
            class Meta:
                type_ = "articles"
                fields = ["title", "body"]
                include_depth = 2

            def get_links(self, instance):
                return [LinkDescriptor(name="author", linked_data=instance.author,
                                       should_be_included=True)]
    """

    class Meta:
        """Provider metadata (type, attributes, URLs, include settings)."""

        type_: str = ""
        model: Any = None
        fields: list[str] | None = None
        base_url: str = ""
        self_sub_url: str | None = None
        include_depth: int = 1
        show_self_in_included: bool = False
        show_meta_in_included: bool = False

    def __init__(self, *, base_url: str | None = None) -> None:
        meta = self.Meta
        if not getattr(meta, "type_", ""):
            raise ValueError(f"{type(self).__name__}.Meta.type_ must be set.")
        self._base_url = (getattr(meta, "base_url", "") if base_url is None else base_url).rstrip("/")

    def _meta_option(self, name: str, default: Any) -> Any:
        return getattr(self.Meta, name, default)

    def get_resource_type(self) -> str:
        """Return the resource type name."""
        return self.Meta.type_

    def get_id(self, instance: Any) -> str:
        """Return the resource id as a string."""
        value = getattr(instance, "id", None)
        return "" if value is None else str(value)

    def get_ids(self, linked_data: Any) -> list[str]:
        """Return ids for a single object or an ordered collection."""
        if isinstance(linked_data, (list, tuple)):
            return [self.get_id(item) for item in linked_data]
        return [self.get_id(linked_data)]

    def get_attributes(self, instance: Any) -> Mapping[str, Any]:
        """Return attributes named by ``Meta.fields``, or all public ones when unset.

        Without ``Meta.fields``, names reported by :meth:`get_links` are left
        out since attributes and relationships share one namespace.
        """
        fields: Sequence[str] | None = self._meta_option("fields", None)
        if fields is not None:
            return {field: getattr(instance, field) for field in fields if field != "id"}
        if hasattr(instance, "__dict__"):
            relationships = {link.name for link in self.get_links(instance)}
            return {
                key: value
                for key, value in vars(instance).items()
                if not key.startswith("_") and key != "id" and key not in relationships
            }
        return {}

    def get_meta(self, resource: Any) -> Any:
        """Return meta for a resource or a collection of linked resources."""
        return None

    def get_self_sub_url(self) -> str:
        """Return the path segment placed between the base URL and the id."""
        sub_url = self._meta_option("self_sub_url", None)
        return f"/{self.get_resource_type()}/" if sub_url is None else sub_url

    def get_self_url(self, instance: Any) -> str | None:
        """Return the canonical URL of the resource.

        Overrides may return ``None``; relationship URLs are then omitted and
        reference-only relationships raise ``MalformedLinkedData``.
        """
        return f"{self._base_url}{self.get_self_sub_url()}{self.get_id(instance)}"

    def get_links(self, instance: Any) -> Iterable[LinkDescriptor]:
        """Return relationship descriptors in declaration order."""
        return ()

    def get_include_depth(self) -> int:
        """Return how deep relationships are followed from this resource type."""
        return int(self._meta_option("include_depth", 1))

    def is_show_self_in_included(self) -> bool:
        """Whether resources included through this type expose ``links.self``."""
        return bool(self._meta_option("show_self_in_included", False))

    def is_show_meta_in_included(self) -> bool:
        """Whether resources included through this type expose ``meta``."""
        return bool(self._meta_option("show_meta_in_included", False))
