#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/renderers/ansi.py
"""ANSI terminal rendering from AST.

This module provides the AnsiRenderer class which converts AST nodes to text
decorated with ANSI SGR escape sequences for display in a fixed-width
terminal. Each node is translated to a layout fragment; the fragments are
wrapped to the terminal width in a final layout pass.

Rendering rules worth knowing:
- Level 1 and 2 headers are centered, deeper levels are styled inline
- Links to other documents become footnotes; anchors and autolinks do not
- Footnotes are numbered in order of appearance and printed after the text
- Tables are replaced by a placeholder, raw content is dropped

"""

from __future__ import annotations

import logging

from ansidoc.ast.nodes import (
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
    Math,
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
from ansidoc.ast.utils import stringify
from ansidoc.ast.visitors import NodeVisitor
from ansidoc.constants import (
    BLOCK_QUOTE_NEST,
    BLOCK_QUOTE_PREFIX,
    BULLET_MARKER,
    CODE_BLOCK_INDENT,
    DEFINITION_INDENT,
    FOOTNOTE_INDENT,
    HORIZONTAL_RULE,
    LIST_ITEM_INDENT,
    TABLE_PLACEHOLDER,
)
from ansidoc.exceptions import RenderingError
from ansidoc.layout import (
    Doc,
    blankline,
    cblock,
    concat,
    cr,
    double_quotes,
    empty,
    hang,
    literal,
    nest,
    prefixed,
    quotes,
    render,
    space,
)
from ansidoc.options.ansi import AnsiOptions
from ansidoc.renderers.base import BaseRenderer
from ansidoc.utils.font_effects import FontEffect, font
from ansidoc.utils.footnotes import FootnoteCollector, note_label, note_marker
from ansidoc.utils.lists import item_separator, ordered_markers

logger = logging.getLogger(__name__)


class AnsiRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to text with ANSI escape sequences.

    Every ``visit_*`` method returns a layout fragment. Rendering a document
    creates a fresh footnote store, so one renderer can render many documents
    one after another; concurrent renders need one renderer each.

    Parameters
    ----------
    options : AnsiOptions or None, default = None
        ANSI rendering options

    Examples
    --------
        >>> from ansidoc.ast import Document, Header, Paragraph, Str, Strong
        >>> doc = Document(children=[
        ...     Header(level=3, content=[Str(content="Title")]),
        ...     Paragraph(content=[Strong(content=[Str(content="bold")])])
        ... ])
        >>> print(repr(AnsiRenderer().render_to_string(doc)))
        '\\x1b[1;4mTitle\\x1b[22;24m\\n\\n\\x1b[1mbold\\x1b[22m'

    """

    def __init__(self, options: AnsiOptions | None = None):
        """Initialize the ANSI renderer with options."""
        BaseRenderer._validate_options_type(options, AnsiOptions, "ansi")
        options = options or AnsiOptions()
        BaseRenderer.__init__(self, options)
        self.options: AnsiOptions = options
        self._footnotes: FootnoteCollector | None = None
        self._small_caps_depth = 0
        self._small_caps_notes: set[int] = set()

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to terminal text.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Text with ANSI SGR sequences, wrapped to ``options.columns``
            unless wrapping is disabled

        """
        layout = self.render_to_layout(doc)
        width = None if self.options.wrap_text == "wrap-none" else self.options.columns
        return render(layout, width)

    def render_to_layout(self, doc: Document) -> Doc:
        """Translate a document to a layout fragment, footnotes included."""
        logger.debug("Rendering document with %d blocks at %d columns", len(doc.children), self.options.columns)
        self._footnotes = FootnoteCollector()
        self._small_caps_depth = 0
        self._small_caps_notes = set()
        try:
            return doc.accept(self)
        finally:
            self._footnotes = None

    # Helpers

    def _blocks(self, blocks: list[Block], sep: Doc = blankline) -> Doc:
        return concat([block.accept(self) for block in blocks], sep)

    def _inlines(self, inlines: list[Inline]) -> Doc:
        return concat([inline.accept(self) for inline in inlines])

    def _collector(self) -> FootnoteCollector:
        if self._footnotes is None:
            raise RenderingError("Footnotes can only be rendered as part of a document; use render_to_layout()")
        return self._footnotes

    def _code(self, text: str) -> Doc:
        return font(FontEffect.BOLD, text)

    # Document

    def visit_document(self, node: Document) -> Doc:
        """Render the body, then the footnotes collected while rendering it."""
        body = self._blocks(node.children)
        notes = [self._note_body(index, note_body) for index, note_body in self._collector().drain()]
        if notes:
            logger.debug("Rendered %d footnotes", len(notes))
        return concat([body, blankline, concat(notes, blankline)])

    def _note_body(self, index: int, blocks: list[Block]) -> Doc:
        # Bodies of notes met inside SmallCaps are upper-cased as well
        saved = self._small_caps_depth
        self._small_caps_depth = 1 if index in self._small_caps_notes else 0
        try:
            content = self._blocks(blocks)
        finally:
            self._small_caps_depth = saved
        return hang(content, FOOTNOTE_INDENT, note_label(index, self.options.unicode))

    # Blocks

    def visit_paragraph(self, node: Paragraph) -> Doc:
        return self._inlines(node.content)

    def visit_plain(self, node: Plain) -> Doc:
        return self._inlines(node.content)

    def visit_block_quote(self, node: BlockQuote) -> Doc:
        """Render quoted blocks with every line starting ``> ``."""
        return prefixed(nest(self._blocks(node.children), BLOCK_QUOTE_NEST), BLOCK_QUOTE_PREFIX)

    def visit_header(self, node: Header) -> Doc:
        """Render a header.

        Levels 1 and 2 are centered to the terminal width (bold and
        underlined, or bold only). Level 3 is bold and underlined, level 4
        faint, and every deeper level bold, all left-aligned.
        """
        content = self._inlines(node.content)
        if node.level <= 1:
            return cblock(font([FontEffect.BOLD, FontEffect.UNDERLINE], content), self.options.columns)
        if node.level == 2:
            return cblock(font(FontEffect.BOLD, content), self.options.columns)
        if node.level == 3:
            return font([FontEffect.BOLD, FontEffect.UNDERLINE], content)
        if node.level == 4:
            return font(FontEffect.FAINT, content)
        return font(FontEffect.BOLD, content)

    def visit_div(self, node: Div) -> Doc:
        return concat([cr, self._blocks(node.children), blankline])

    def visit_raw_block(self, node: RawBlock) -> Doc:
        logger.debug("Dropping raw %s block", node.format)
        return empty

    def visit_null(self, node: Null) -> Doc:
        return empty

    def visit_line_block(self, node: LineBlock) -> Doc:
        return concat([self._inlines(line) for line in node.lines], cr)

    def visit_table(self, node: Table) -> Doc:
        logger.debug("Replacing table with %d rows by a placeholder", len(node.rows))
        return literal(TABLE_PLACEHOLDER)

    def visit_definition_list(self, node: DefinitionList) -> Doc:
        """Render terms in bold, their definitions indented and set off by blank lines."""
        items = []
        for term, definitions in node.items:
            inner = concat([concat([blankline, self._blocks(definition), blankline]) for definition in definitions])
            items.append(hang(inner, DEFINITION_INDENT, concat([font(FontEffect.BOLD, self._inlines(term)), cr])))
        return concat(items, blankline)

    def visit_bullet_list(self, node: BulletList) -> Doc:
        items = [hang(self._blocks(item), LIST_ITEM_INDENT, BULLET_MARKER) for item in node.items]
        return concat([cr, concat(items, item_separator(node.items))])

    def visit_ordered_list(self, node: OrderedList) -> Doc:
        """Render numbered items hung under markers of a shared width."""
        width, markers = ordered_markers(node.start, node.style, node.delimiter, len(node.items))
        items = [hang(self._blocks(item), width, marker) for item, marker in zip(node.items, markers)]
        return concat([cr, *items], item_separator(node.items))

    def visit_code_block(self, node: CodeBlock) -> Doc:
        return nest(concat([cr, literal(node.content), cr]), CODE_BLOCK_INDENT)

    def visit_horizontal_rule(self, node: HorizontalRule) -> Doc:
        return cblock(HORIZONTAL_RULE, self.options.columns)

    # Inlines

    def visit_str(self, node: Str) -> Doc:
        if self._small_caps_depth:
            return literal(node.content.upper())
        return literal(node.content)

    def visit_space(self, node: Space) -> Doc:
        return space

    def visit_soft_break(self, node: SoftBreak) -> Doc:
        return cr if self.options.wrap_text == "wrap-preserve" else space

    def visit_line_break(self, node: LineBreak) -> Doc:
        return cr

    def visit_raw_inline(self, node: RawInline) -> Doc:
        logger.debug("Dropping raw %s inline", node.format)
        return empty

    def visit_code(self, node: Code) -> Doc:
        return self._code(node.content)

    def visit_emph(self, node: Emph) -> Doc:
        effect = FontEffect.ITALIC if self.options.italic else FontEffect.UNDERLINE
        return font(effect, self._inlines(node.content))

    def visit_strong(self, node: Strong) -> Doc:
        return font(FontEffect.BOLD, self._inlines(node.content))

    def visit_strikeout(self, node: Strikeout) -> Doc:
        return font(FontEffect.STRIKEOUT, self._inlines(node.content))

    def visit_subscript(self, node: Subscript) -> Doc:
        return concat(["~", self._inlines(node.content), "~"])

    def visit_superscript(self, node: Superscript) -> Doc:
        return concat(["^", self._inlines(node.content), "^"])

    def visit_small_caps(self, node: SmallCaps) -> Doc:
        """Render the content with every string upper-cased."""
        self._small_caps_depth += 1
        try:
            return self._inlines(node.content)
        finally:
            self._small_caps_depth -= 1

    def visit_underline(self, node: Underline) -> Doc:
        return font(FontEffect.UNDERLINE, self._inlines(node.content))

    def visit_cite(self, node: Cite) -> Doc:
        return self._inlines(node.content)

    def visit_math(self, node: Math) -> Doc:
        marker = "$$" if node.displayed else "$"
        return concat([marker, self._code(node.content), marker])

    def visit_span(self, node: Span) -> Doc:
        return self._inlines(node.content)

    def visit_link(self, node: Link) -> Doc:
        """Render link text, moving the target into a footnote.

        Same-document anchors (``#section``) and autolinks, whose text is the
        target itself, render as their text alone.
        """
        if node.target.startswith("#") or node.target == stringify(node.content):
            return self._inlines(node.content)
        target_note = Note(children=[Plain(content=[Str(content=node.target)])])
        content = self._inlines(node.content)
        # The target is not link text, so SmallCaps does not apply to it
        saved, self._small_caps_depth = self._small_caps_depth, 0
        try:
            marker = target_note.accept(self)
        finally:
            self._small_caps_depth = saved
        return concat([content, marker])

    def visit_image(self, node: Image) -> Doc:
        return self._inlines(node.content)

    def visit_quoted(self, node: Quoted) -> Doc:
        content = self._inlines(node.content)
        return double_quotes(content) if node.double else quotes(content)

    def visit_note(self, node: Note) -> Doc:
        index = self._collector().record(node.children)
        if self._small_caps_depth:
            self._small_caps_notes.add(index)
        return literal(note_marker(index, self.options.unicode))
