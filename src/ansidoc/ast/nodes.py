#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy consumed by the terminal renderer. The
tree is produced by an upstream document parser; this package only reads it.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.
Nodes fall into two closed categories:

Block-level nodes begin a new line or region:
    - Paragraph, Plain, BlockQuote, Header, Div, RawBlock, Null
    - LineBlock, Table, DefinitionList, BulletList, OrderedList
    - CodeBlock, HorizontalRule

Inline nodes make up the content of a line:
    - Str, Space, SoftBreak, LineBreak, RawInline, Code
    - Emph, Strong, Strikeout, Subscript, Superscript, SmallCaps, Underline
    - Cite, Math, Span, Link, Image, Quoted, Note

Parents exclusively own their children; the tree has no cycles and no
shared subtrees.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ListNumberStyle(str, Enum):
    """Numbering style of an ordered list."""

    DEFAULT = "DefaultStyle"
    EXAMPLE = "Example"
    DECIMAL = "Decimal"
    LOWER_ALPHA = "LowerAlpha"
    UPPER_ALPHA = "UpperAlpha"
    LOWER_ROMAN = "LowerRoman"
    UPPER_ROMAN = "UpperRoman"


class ListNumberDelimiter(str, Enum):
    """Delimiter around ordered list numerals (``1.``, ``1)``, ``(1)``)."""

    DEFAULT = "DefaultDelim"
    PERIOD = "Period"
    ONE_PAREN = "OneParen"
    TWO_PARENS = "TwoParens"


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class Block(Node):
    """Marker base class for block-level nodes."""


class Inline(Node):
    """Marker base class for inline nodes."""


BlockList = list[Block]
InlineList = list[Inline]
ListItem = list[Block]
DefinitionItem = tuple[InlineList, list[BlockList]]


# ============================================================================
# Document
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Block, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, author, etc.)

    """

    children: list[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Paragraph(Block):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Plain(Block):
    """Inline content not wrapped in a paragraph.

    Parsers produce Plain blocks for the content of tight list items. The
    distinction from Paragraph matters only for list tightness.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Inline nodes
    metadata : dict, default = empty dict
        Block metadata

    """

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this plain block."""
        return visitor.visit_plain(self)


@dataclass
class BlockQuote(Block):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Block, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class Header(Block):
    """Header node.

    Parameters
    ----------
    level : int
        Header level, 1 being the most important. Levels beyond 6 are legal.
    content : list of Inline, default = empty list
        Inline nodes representing header text
    metadata : dict, default = empty dict
        Header metadata

    """

    level: int
    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate header level is positive."""
        if self.level < 1:
            raise ValueError(f"Header level must be at least 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header."""
        return visitor.visit_header(self)


@dataclass
class Div(Block):
    """Generic block container with attributes.

    Parameters
    ----------
    children : list of Block, default = empty list
        Contained blocks
    identifier : str, default = ""
        Element identifier
    classes : list of str, default = empty list
        Element classes
    metadata : dict, default = empty dict
        Div metadata

    """

    children: list[Block] = field(default_factory=list)
    identifier: str = ""
    classes: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this div."""
        return visitor.visit_div(self)


@dataclass
class RawBlock(Block):
    """Raw content in a specific output format (e.g. ``html``, ``latex``)."""

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw block."""
        return visitor.visit_raw_block(self)


@dataclass
class Null(Block):
    """Block with no content."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this null block."""
        return visitor.visit_null(self)


@dataclass
class LineBlock(Block):
    """Sequence of lines whose breaks are significant (poetry, addresses).

    Parameters
    ----------
    lines : list of list of Inline, default = empty list
        One inline sequence per line
    metadata : dict, default = empty dict
        Line block metadata

    """

    lines: list[list[Inline]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line block."""
        return visitor.visit_line_block(self)


@dataclass
class Table(Block):
    """Table node.

    Tables have no terminal rendering beyond a placeholder, so only the
    caption and raw cell blocks are kept.

    Parameters
    ----------
    caption : list of Inline, default = empty list
        Table caption
    rows : list of list of list of Block, default = empty list
        Rows of cells, each cell being a block sequence
    metadata : dict, default = empty dict
        Table metadata

    """

    caption: list[Inline] = field(default_factory=list)
    rows: list[list[list[Block]]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class DefinitionList(Block):
    """Definition list node.

    Parameters
    ----------
    items : list of (list of Inline, list of list of Block)
        Pairs of a term and its definitions; each definition is a block
        sequence
    metadata : dict, default = empty dict
        Definition list metadata

    """

    items: list[DefinitionItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition list."""
        return visitor.visit_definition_list(self)


@dataclass
class BulletList(Block):
    """Unordered list node.

    Parameters
    ----------
    items : list of list of Block, default = empty list
        List items, each a block sequence
    metadata : dict, default = empty dict
        List metadata

    """

    items: list[ListItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bullet list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Block):
    """Ordered (numbered) list node.

    Parameters
    ----------
    items : list of list of Block, default = empty list
        List items, each a block sequence
    start : int, default = 1
        Number of the first item
    style : ListNumberStyle, default = ListNumberStyle.DEFAULT
        Numeral style
    delimiter : ListNumberDelimiter, default = ListNumberDelimiter.DEFAULT
        Delimiter around the numeral
    metadata : dict, default = empty dict
        List metadata

    """

    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    style: ListNumberStyle = ListNumberStyle.DEFAULT
    delimiter: ListNumberDelimiter = ListNumberDelimiter.DEFAULT
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Coerce style and delimiter given by value."""
        self.style = ListNumberStyle(self.style)
        self.delimiter = ListNumberDelimiter(self.delimiter)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this ordered list."""
        return visitor.visit_ordered_list(self)


@dataclass
class CodeBlock(Block):
    """Code block node.

    Parameters
    ----------
    content : str
        Code content, rendered verbatim
    language : str or None, default = None
        Programming language (informational only)
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    language: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class HorizontalRule(Block):
    """Horizontal rule (thematic break) node."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this horizontal rule."""
        return visitor.visit_horizontal_rule(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Str(Inline):
    """Run of text without breakable whitespace.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this string."""
        return visitor.visit_str(self)


@dataclass
class Space(Inline):
    """Inter-word space."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this space."""
        return visitor.visit_space(self)


@dataclass
class SoftBreak(Inline):
    """Line break present in the source but not significant for layout."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass
class LineBreak(Inline):
    """Hard line break."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class RawInline(Inline):
    """Raw inline content in a specific output format."""

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this raw inline."""
        return visitor.visit_raw_inline(self)


@dataclass
class Code(Inline):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code text (not parsed)
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class Emph(Inline):
    """Emphasized text."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emph(self)


@dataclass
class Strong(Inline):
    """Strongly emphasized text."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Strikeout(Inline):
    """Struck-out text."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikeout."""
        return visitor.visit_strikeout(self)


@dataclass
class Subscript(Inline):
    """Subscripted text."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class Superscript(Inline):
    """Superscripted text."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class SmallCaps(Inline):
    """Small capitals."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this small caps span."""
        return visitor.visit_small_caps(self)


@dataclass
class Underline(Inline):
    """Underlined text."""

    content: list[Inline] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this underline."""
        return visitor.visit_underline(self)


@dataclass
class Cite(Inline):
    """Citation.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Rendered citation text
    citation_ids : list of str, default = empty list
        Keys of the cited works
    metadata : dict, default = empty dict
        Citation metadata

    """

    content: list[Inline] = field(default_factory=list)
    citation_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this citation."""
        return visitor.visit_cite(self)


@dataclass
class Math(Inline):
    """Math expression.

    Parameters
    ----------
    content : str
        Math source (usually TeX)
    displayed : bool, default = False
        True for display math, False for inline math
    metadata : dict, default = empty dict
        Math metadata

    """

    content: str
    displayed: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math expression."""
        return visitor.visit_math(self)


@dataclass
class Span(Inline):
    """Generic inline container with attributes."""

    content: list[Inline] = field(default_factory=list)
    identifier: str = ""
    classes: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_span(self)


@dataclass
class Link(Inline):
    """Hyperlink node.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Link text
    target : str, default = ""
        Link URL; a leading ``#`` marks a same-document anchor
    title : str or None, default = None
        Link title
    metadata : dict, default = empty dict
        Link metadata

    """

    content: list[Inline] = field(default_factory=list)
    target: str = ""
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Inline):
    """Image node.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Caption (alternative text)
    target : str, default = ""
        Image URL
    title : str or None, default = None
        Image title
    metadata : dict, default = empty dict
        Image metadata

    """

    content: list[Inline] = field(default_factory=list)
    target: str = ""
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class Quoted(Inline):
    """Quoted text.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Quoted content
    double : bool, default = True
        True for double quotes, False for single quotes
    metadata : dict, default = empty dict
        Quote metadata

    """

    content: list[Inline] = field(default_factory=list)
    double: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this quotation."""
        return visitor.visit_quoted(self)


@dataclass
class Note(Inline):
    """Footnote; the body is a block sequence rendered after the document.

    Parameters
    ----------
    children : list of Block, default = empty list
        Footnote body
    metadata : dict, default = empty dict
        Note metadata

    """

    children: list[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this note."""
        return visitor.visit_note(self)


LIST_BLOCK_TYPES: tuple[type[Block], ...] = (BulletList, OrderedList, DefinitionList)

AnyNode = Union[Block, Inline, Document]
