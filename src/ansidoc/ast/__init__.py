#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The AST is the input of the terminal renderer. It is produced by an external
document parser and consumed read-only here.

The module consists of several components:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern base class for AST traversal
- utils: Text flattening and node classification helpers

Examples
--------
Basic usage:

    >>> from ansidoc.ast import Document, Header, Paragraph, Str
    >>> from ansidoc.renderers.ansi import AnsiRenderer
    >>>
    >>> doc = Document(children=[
    ...     Header(level=1, content=[Str(content="Title")]),
    ...     Paragraph(content=[Str(content="Hello")])
    ... ])
    >>> text = AnsiRenderer().render_to_string(doc)

"""

from __future__ import annotations

from ansidoc.ast.nodes import (
    LIST_BLOCK_TYPES,
    Block,
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    Div,
    Document,
    Emph,
    Header,
    HorizontalRule,
    Image,
    Inline,
    LineBlock,
    LineBreak,
    Link,
    ListNumberDelimiter,
    ListNumberStyle,
    Math,
    Node,
    Note,
    Null,
    OrderedList,
    Paragraph,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    Underline,
)
from ansidoc.ast.utils import is_list_block, stringify
from ansidoc.ast.visitors import NodeVisitor

__all__ = [
    # Base classes
    "Node",
    "Block",
    "Inline",
    "Document",
    # Blocks
    "Paragraph",
    "Plain",
    "BlockQuote",
    "Header",
    "Div",
    "RawBlock",
    "Null",
    "LineBlock",
    "Table",
    "DefinitionList",
    "BulletList",
    "OrderedList",
    "CodeBlock",
    "HorizontalRule",
    # Inlines
    "Str",
    "Space",
    "SoftBreak",
    "LineBreak",
    "RawInline",
    "Code",
    "Emph",
    "Strong",
    "Strikeout",
    "Subscript",
    "Superscript",
    "SmallCaps",
    "Underline",
    "Cite",
    "Math",
    "Span",
    "Link",
    "Image",
    "Quoted",
    "Note",
    # Enums and groups
    "ListNumberStyle",
    "ListNumberDelimiter",
    "LIST_BLOCK_TYPES",
    # Visitors and helpers
    "NodeVisitor",
    "stringify",
    "is_list_block",
]
