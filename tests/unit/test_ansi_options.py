#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ansi_options.py
"""Unit tests for AnsiOptions and the render_ansi entry point.

Tests cover:
- Option defaults and validation
- Frozen options and create_updated
- Option overrides passed to render_ansi

"""

from dataclasses import FrozenInstanceError, fields

import pytest
from utils import para

from ansidoc import AnsiOptions, render_ansi
from ansidoc.ast import Document, Emph, Header, Paragraph, SoftBreak, Str


@pytest.mark.unit
class TestAnsiOptions:
    """Tests for option values."""

    def test_defaults(self) -> None:
        """Test the default option values."""
        options = AnsiOptions()
        assert options.italic is False
        assert options.unicode is False
        assert options.columns == 72
        assert options.wrap_text == "wrap-auto"

    @pytest.mark.parametrize("columns", [0, -5])
    def test_invalid_columns(self, columns) -> None:
        """Test non-positive widths are rejected."""
        with pytest.raises(ValueError, match="columns"):
            AnsiOptions(columns=columns)

    def test_invalid_wrap_mode(self) -> None:
        """Test unknown wrap modes are rejected."""
        with pytest.raises(ValueError, match="wrap_text"):
            AnsiOptions(wrap_text="wrap-sometimes")

    def test_frozen(self) -> None:
        """Test options cannot be modified in place."""
        options = AnsiOptions()
        with pytest.raises(FrozenInstanceError):
            options.columns = 10

    def test_create_updated(self) -> None:
        """Test create_updated returns a modified copy."""
        options = AnsiOptions()
        updated = options.create_updated(columns=40, italic=True)
        assert (updated.columns, updated.italic) == (40, True)
        assert options.columns == 72

    def test_create_updated_validates(self) -> None:
        """Test copies are validated like new instances."""
        with pytest.raises(ValueError):
            AnsiOptions().create_updated(columns=0)

    def test_fields_carry_help(self) -> None:
        """Test every option is documented in its field metadata."""
        for option in fields(AnsiOptions):
            assert option.metadata["help"]
            assert option.metadata["importance"] in ("core", "advanced")


@pytest.mark.unit
class TestRenderAnsi:
    """Tests for the render_ansi convenience function."""

    def test_defaults(self) -> None:
        """Test rendering with default options."""
        assert render_ansi(Document(children=[para("hi")])) == "hi"

    def test_columns_argument(self) -> None:
        """Test the columns argument sets the width."""
        doc = Document(children=[Header(level=2, content=[Str(content="ab")])])
        assert render_ansi(doc, columns=6) == "  \x1b[1mab\x1b[22m"

    def test_columns_overrides_options(self) -> None:
        """Test columns takes precedence over the options object."""
        doc = Document(children=[para("aaa bbb")])
        assert render_ansi(doc, columns=4, options=AnsiOptions(columns=80)) == "aaa\nbbb"

    def test_keyword_overrides(self) -> None:
        """Test individual options can be passed as keywords."""
        doc = Document(children=[Paragraph(content=[Emph(content=[Str(content="x")])])])
        assert render_ansi(doc, italic=True) == "\x1b[3mx\x1b[23m"

    def test_keyword_overrides_options(self) -> None:
        """Test keywords are applied on top of the options object."""
        doc = Document(children=[Paragraph(content=[Str(content="a"), SoftBreak(), Str(content="b")])])
        options = AnsiOptions(wrap_text="wrap-preserve")
        assert render_ansi(doc, options=options) == "a\nb"
        assert render_ansi(doc, options=options, wrap_text="wrap-auto") == "a b"

    def test_unknown_keyword(self) -> None:
        """Test keywords that do not name an option are rejected."""
        with pytest.raises(TypeError):
            render_ansi(Document(), colour=True)
