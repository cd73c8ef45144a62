#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
stringify : Flatten nodes to their plain text content
is_list_block : Test whether a block is one of the list variants

Examples
--------
    >>> from ansidoc.ast import Emph, Space, Str
    >>> stringify([Str(content="Hello"), Space(), Emph(content=[Str(content="world")])])
    'Hello world'

"""

from __future__ import annotations

from typing import Iterable, Union

from ansidoc.ast.nodes import (
    LIST_BLOCK_TYPES,
    Block,
    BlockQuote,
    BulletList,
    Code,
    DefinitionList,
    Div,
    Document,
    LineBlock,
    LineBreak,
    Math,
    Node,
    Note,
    OrderedList,
    Quoted,
    RawBlock,
    RawInline,
    SoftBreak,
    Space,
    Str,
    Table,
)
from ansidoc.constants import DOUBLE_QUOTES, SINGLE_QUOTES


def stringify(node_or_nodes: Union[Node, Iterable[Node]]) -> str:
    """Flatten a node or sequence of nodes to plain text.

    Str content is kept verbatim, spaces and breaks become a single space,
    code and math contribute their source text, quotes are rendered with
    typographic quote marks, and footnote bodies and raw content are skipped.

    Parameters
    ----------
    node_or_nodes : Node or iterable of Node
        Nodes to flatten

    Returns
    -------
    str
        Plain text content

    """
    if isinstance(node_or_nodes, Node):
        return _stringify_node(node_or_nodes)
    return "".join(_stringify_node(node) for node in node_or_nodes)


def _stringify_node(node: Node) -> str:
    if isinstance(node, Str):
        return node.content
    if isinstance(node, (Space, SoftBreak, LineBreak)):
        return " "
    if isinstance(node, (Code, Math)):
        return node.content
    if isinstance(node, (Note, RawInline, RawBlock)):
        return ""
    if isinstance(node, Quoted):
        opening, closing = DOUBLE_QUOTES if node.double else SINGLE_QUOTES
        return opening + stringify(node.content) + closing
    if isinstance(node, (Document, BlockQuote, Div)):
        return stringify(node.children)
    if isinstance(node, LineBlock):
        return " ".join(stringify(line) for line in node.lines)
    if isinstance(node, (BulletList, OrderedList)):
        return " ".join(stringify(item) for item in node.items)
    if isinstance(node, DefinitionList):
        parts = []
        for term, definitions in node.items:
            parts.append(stringify(term))
            parts.extend(stringify(definition) for definition in definitions)
        return " ".join(parts)
    if isinstance(node, Table):
        return stringify(node.caption)

    # Remaining containers keep their children in ``content``
    content = getattr(node, "content", None)
    if isinstance(content, list):
        return stringify(content)
    return ""


def is_list_block(block: Block) -> bool:
    """Return True for bullet, ordered and definition lists."""
    return isinstance(block, LIST_BLOCK_TYPES)
