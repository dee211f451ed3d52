"""SQLAlchemy helpers for JSON:API."""

from .provider import SQLAlchemySchemaProvider

__all__ = ["SQLAlchemySchemaProvider"]
