"""Output renderers for assembled documents."""

from .json import JsonRenderer
from .options import EncodeOptions

__all__ = ["EncodeOptions", "JsonRenderer"]
