"""Pydantic schema templates for JSON:API v1.1 documents."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentLinks(BaseModel):
    """Top-level document links; unset URLs are left out of the output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_: Optional[str] = Field(default=None, alias="self")
    first: Optional[str] = None
    last: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """Relationship object: linkage, links and meta."""

    data: Optional[Any] = None
    links: Optional[Dict[str, str]] = None
    meta: Optional[Any] = None


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: str
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None
    links: Optional[Dict[str, str]] = None
    meta: Optional[Any] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    data: Optional[Any] = None
    included: Optional[List[JSONAPIResource]] = None
    meta: Optional[Any] = None
    links: Optional[Dict[str, str]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[Dict[str, Any]]
