"""Schema provider deriving resources from SQLAlchemy mappings."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from sqlalchemy.inspection import inspect
from sqlalchemy.orm.attributes import NO_VALUE

from jsonapi_encoder.schemas.links import LinkDescriptor
from jsonapi_encoder.schemas.provider import SchemaProvider


class SQLAlchemySchemaProvider(SchemaProvider):
    """Describe a mapped class through its mapper.

    ``Meta.model`` is the mapped class. When ``Meta.fields`` is unset every
    column attribute except primary and foreign keys becomes an attribute.
    Relationships are emitted in mapper order; ``Meta.included`` names the
    ones added to ``included``, ``Meta.related`` the ones shown with
    ``self``/``related`` links and ``Meta.references`` the ones rendered only
    as a related URL. Relationships that are not loaded are reported as
    ``None`` or ``[]`` instead of triggering a lazy load.
    """

    class Meta:
        type_: str = ""
        model: Any = None
        fields: list[str] | None = None
        included: tuple[str, ...] = ()
        related: tuple[str, ...] = ()
        references: tuple[str, ...] = ()

    def __init__(self, *, base_url: str | None = None) -> None:
        super().__init__(base_url=base_url)
        model = self._meta_option("model", None)
        if model is None:
            raise ValueError(f"{type(self).__name__}.Meta.model must be set.")
        self._mapper = inspect(model)

    def get_id(self, instance: Any) -> str:
        identity = [getattr(instance, column.key) for column in self._primary_key_attrs()]
        if any(value is None for value in identity):
            return ""
        return "-".join(str(value) for value in identity)

    def get_attributes(self, instance: Any) -> Mapping[str, Any]:
        if self._meta_option("fields", None) is not None:
            return super().get_attributes(instance)
        excluded = {prop.key for prop in self._primary_key_attrs()}
        excluded.update(self._foreign_key_attrs())
        return {
            prop.key: getattr(instance, prop.key)
            for prop in self._mapper.column_attrs
            if prop.key not in excluded
        }

    def get_links(self, instance: Any) -> Iterable[LinkDescriptor]:
        included = set(self._meta_option("included", ()))
        related = set(self._meta_option("related", ()))
        references = set(self._meta_option("references", ()))
        for relationship in self._mapper.relationships:
            key = relationship.key
            yield LinkDescriptor(
                name=key,
                linked_data=self._relationship_data(instance, relationship),
                show_as_reference=key in references,
                should_be_included=key in included,
                show_self=key in related,
                show_related=key in related,
            )

    def _primary_key_attrs(self) -> list[Any]:
        return [self._mapper.get_property_by_column(column) for column in self._mapper.primary_key]

    def _foreign_key_attrs(self) -> set[str]:
        keys: set[str] = set()
        for prop in self._mapper.column_attrs:
            if any(column.foreign_keys for column in prop.columns):
                keys.add(prop.key)
        return keys

    def _relationship_data(self, instance: Any, relationship: Any) -> Any:
        empty: Any = [] if relationship.uselist else None
        attr_state = inspect(instance).attrs[relationship.key]
        if attr_state.loaded_value is NO_VALUE:
            return empty
        related = attr_state.loaded_value
        if relationship.uselist:
            return list(related) if related else []
        return related
