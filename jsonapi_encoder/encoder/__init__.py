"""JSON:API encoder."""

from .base import Encoder

__all__ = ["Encoder"]
