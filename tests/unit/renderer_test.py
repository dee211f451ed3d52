"""Unit tests for the JSON renderer."""

import datetime
import decimal
import uuid

import pytest
from pydantic import ValidationError

from jsonapi_encoder import EncodeOptions, RenderError
from jsonapi_encoder.renderers import JsonRenderer


class TestJsonRenderer:
    """Tests for rendering documents as text."""

    def test_default_rendering(self) -> None:
        """Test compact default output."""
        assert JsonRenderer().render({"data": None}) == '{"data": null}'

    def test_converts_common_python_values(self) -> None:
        """Test that dates, decimals and UUIDs are rendered as strings."""
        identifier = uuid.UUID("12345678-1234-5678-1234-567812345678")
        document = {
            "meta": {
                "at": datetime.date(2024, 1, 31),
                "price": decimal.Decimal("1.50"),
                "uuid": identifier,
            }
        }
        output = JsonRenderer(EncodeOptions(sort_keys=True)).render(document)
        assert output == (
            '{"meta": {"at": "2024-01-31", "price": "1.50", '
            '"uuid": "12345678-1234-5678-1234-567812345678"}}'
        )

    def test_unknown_values_raise_render_error(self) -> None:
        """Test that arbitrary objects cannot be rendered."""
        with pytest.raises(RenderError):
            JsonRenderer().render({"meta": object()})

    def test_max_depth(self) -> None:
        """Test that nesting deeper than max_depth fails."""
        renderer = JsonRenderer(EncodeOptions(max_depth=2))
        assert renderer.render({"data": []}) == '{"data": []}'
        with pytest.raises(RenderError):
            renderer.render({"data": [{"type": "people"}]})

    def test_separators(self) -> None:
        """Test custom separators."""
        options = EncodeOptions(separators=(",", ":"))
        assert JsonRenderer().render({"data": [], "meta": 1}, options) == '{"data":[],"meta":1}'

    def test_options_are_validated(self) -> None:
        """Test that invalid option values are rejected."""
        with pytest.raises(ValidationError):
            EncodeOptions(indent=-1)
        with pytest.raises(ValidationError):
            EncodeOptions(max_depth=0)
