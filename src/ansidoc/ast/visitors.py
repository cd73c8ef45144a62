#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for processing AST nodes. Every
node class has exactly one abstract ``visit_*`` method here, so a concrete
visitor that forgets a node variant cannot be instantiated. Adding a node
type is therefore a visible change for every renderer.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ansidoc.ast.nodes import (
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
    LineBlock,
    LineBreak,
    Link,
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node type. Nodes dispatch
    to them through ``node.accept(visitor)``; the return value of the visit
    method is passed back unchanged.

    Examples
    --------
    Collect all text of a paragraph:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_str(self, node):
        ...         return node.content
        ...     # ... remaining visit_* methods ...

    """

    # Document

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    # Blocks

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_plain(self, node: Plain) -> Any:
        """Visit a Plain node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_header(self, node: Header) -> Any:
        """Visit a Header node."""

    @abstractmethod
    def visit_div(self, node: Div) -> Any:
        """Visit a Div node."""

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node."""

    @abstractmethod
    def visit_null(self, node: Null) -> Any:
        """Visit a Null node."""

    @abstractmethod
    def visit_line_block(self, node: LineBlock) -> Any:
        """Visit a LineBlock node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""

    # Inlines

    @abstractmethod
    def visit_str(self, node: Str) -> Any:
        """Visit a Str node."""

    @abstractmethod
    def visit_space(self, node: Space) -> Any:
        """Visit a Space node."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_emph(self, node: Emph) -> Any:
        """Visit an Emph node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_strikeout(self, node: Strikeout) -> Any:
        """Visit a Strikeout node."""

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps) -> Any:
        """Visit a SmallCaps node."""

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""

    @abstractmethod
    def visit_cite(self, node: Cite) -> Any:
        """Visit a Cite node."""

    @abstractmethod
    def visit_math(self, node: Math) -> Any:
        """Visit a Math node."""

    @abstractmethod
    def visit_span(self, node: Span) -> Any:
        """Visit a Span node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_quoted(self, node: Quoted) -> Any:
        """Visit a Quoted node."""

    @abstractmethod
    def visit_note(self, node: Note) -> Any:
        """Visit a Note node."""

    def generic_visit(self, node: Node) -> Any:
        """Dispatch ``node`` to its visit method.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of the node's visit method

        """
        return node.accept(self)
