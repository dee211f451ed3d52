"""Rendering options for JSON output."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class EncodeOptions(BaseModel):
    """Options passed through to the JSON renderer."""

    model_config = ConfigDict(frozen=True)

    indent: Optional[int] = Field(default=None, ge=0)
    sort_keys: bool = False
    ensure_ascii: bool = True
    separators: Optional[Tuple[str, str]] = None
    max_depth: Optional[int] = Field(default=None, ge=1)
