"""Relationship descriptors returned by schema providers."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class LinkDescriptor(BaseModel):
    """Describe one relationship of a resource.

    ``linked_data`` is ``None`` for a null to-one relationship, an empty list
    for an empty to-many relationship, a single object, or a list of objects.
    The sub URLs are appended to the owning resource's self URL and default to
    ``/relationships/<name>`` and ``/<name>``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    linked_data: Any = None
    show_as_reference: bool = False
    should_be_included: bool = False
    show_self: bool = False
    show_related: bool = False
    show_meta: bool = False
    self_sub_url: Optional[str] = None
    related_sub_url: Optional[str] = None

    @model_validator(mode="after")
    def _default_sub_urls(self) -> "LinkDescriptor":
        if self.self_sub_url is None:
            object.__setattr__(self, "self_sub_url", f"/relationships/{self.name}")
        if self.related_sub_url is None:
            object.__setattr__(self, "related_sub_url", f"/{self.name}")
        return self
