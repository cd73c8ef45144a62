#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST nodes, the visitor base class and AST utilities.

Tests cover:
- Node construction and validation
- Visitor dispatch for every node type
- Exhaustiveness of visitors
- Plain text flattening

"""

import inspect

import pytest
from utils import plain, words

from ansidoc.ast import (
    BlockQuote,
    BulletList,
    Code,
    CodeBlock,
    DefinitionList,
    Document,
    Emph,
    Header,
    LineBreak,
    ListNumberDelimiter,
    ListNumberStyle,
    Math,
    Node,
    NodeVisitor,
    Note,
    OrderedList,
    Paragraph,
    Quoted,
    RawInline,
    SoftBreak,
    Str,
    Table,
    is_list_block,
    nodes,
    stringify,
)


def _concrete_node_classes() -> list:
    return [
        obj
        for _, obj in inspect.getmembers(nodes, inspect.isclass)
        if issubclass(obj, Node) and not inspect.isabstract(obj) and obj.__module__ == nodes.__name__
    ]


@pytest.mark.unit
class TestNodeConstruction:
    """Tests for node construction."""

    def test_header_level_must_be_positive(self) -> None:
        """Test header levels below 1 are rejected."""
        with pytest.raises(ValueError):
            Header(level=0)

    def test_deep_header_levels_allowed(self) -> None:
        """Test levels beyond 6 are legal."""
        assert Header(level=12).level == 12

    def test_ordered_list_defaults(self) -> None:
        """Test ordered list defaults."""
        ordered = OrderedList()
        assert ordered.start == 1
        assert ordered.style is ListNumberStyle.DEFAULT
        assert ordered.delimiter is ListNumberDelimiter.DEFAULT

    def test_ordered_list_coerces_values(self) -> None:
        """Test style and delimiter given as strings become enum members."""
        ordered = OrderedList(style="UpperRoman", delimiter="OneParen")
        assert ordered.style is ListNumberStyle.UPPER_ROMAN
        assert ordered.delimiter is ListNumberDelimiter.ONE_PAREN

    def test_ordered_list_rejects_unknown_style(self) -> None:
        """Test unknown numbering styles are rejected."""
        with pytest.raises(ValueError):
            OrderedList(style="Hebrew")

    def test_metadata_not_shared(self) -> None:
        """Test each node gets its own metadata dict."""
        first, second = Str(content="a"), Str(content="b")
        first.metadata["k"] = 1
        assert second.metadata == {}


@pytest.mark.unit
class TestVisitor:
    """Tests for visitor dispatch."""

    def test_every_node_has_a_visit_method(self) -> None:
        """Test each node type dispatches to an abstract method of NodeVisitor."""

        class Recorder:
            def __getattr__(self, name):
                return lambda node: name

        abstract = NodeVisitor.__abstractmethods__
        for node_class in _concrete_node_classes():
            fields = {"content": "x"} if node_class in (Str, Code, CodeBlock, Math) else {}
            if node_class is Header:
                fields = {"level": 1}
            elif node_class.__name__ in ("RawBlock", "RawInline"):
                fields = {"format": "html", "content": ""}
            method = node_class(**fields).accept(Recorder())
            assert method in abstract, node_class.__name__

    def test_visit_methods_match_node_types(self) -> None:
        """Test there is exactly one visit method per node type."""
        assert len(NodeVisitor.__abstractmethods__) == len(_concrete_node_classes())

    def test_incomplete_visitor_cannot_be_instantiated(self) -> None:
        """Test a visitor missing a node type is rejected."""

        class Incomplete(NodeVisitor):
            def visit_document(self, node):
                return None

        with pytest.raises(TypeError):
            Incomplete()


@pytest.mark.unit
class TestStringify:
    """Tests for plain text flattening."""

    def test_inlines(self) -> None:
        """Test spaces, breaks and nested content."""
        content = [Str(content="a"), SoftBreak(), Emph(content=words("b c")), LineBreak(), Code(content="d")]
        assert stringify(content) == "a b c d"

    def test_notes_and_raw_content_skipped(self) -> None:
        """Test footnote bodies and raw content contribute nothing."""
        content = [Str(content="a"), Note(children=[plain("x")]), RawInline(format="html", content="<b>")]
        assert stringify(content) == "a"

    def test_quotes_and_math(self) -> None:
        """Test quoted text and math source."""
        assert stringify([Quoted(content=words("q")), Math(content="x")]) == "“q”x"

    def test_blocks(self) -> None:
        """Test block containers."""
        doc = Document(children=[BlockQuote(children=[Paragraph(content=words("a b"))])])
        assert stringify(doc) == "a b"
        assert stringify(Table(caption=words("cap"))) == "cap"


@pytest.mark.unit
class TestListBlocks:
    """Tests for list block classification."""

    def test_is_list_block(self) -> None:
        """Test the three list variants are recognized."""
        assert is_list_block(BulletList())
        assert is_list_block(OrderedList())
        assert is_list_block(DefinitionList())
        assert not is_list_block(plain("a"))
