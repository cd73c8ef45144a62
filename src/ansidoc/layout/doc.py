#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/layout/doc.py
"""Layout fragments and the combinators that build them.

A fragment (``Doc``) is formatted but not yet wrapped text. Fragments carry
breakable spaces, line and blank-line requests, and nesting information, and
are turned into final text by :func:`ansidoc.layout.render.render` once the
target width is known.

Plain strings are accepted anywhere a fragment is expected and become
unbreakable literal text. Lists and tuples of fragments are concatenated.

Examples
--------
    >>> from ansidoc.layout import blankline, concat, hang, render, space
    >>> item = hang(concat(["first", space, "item"]), 2, "- ")
    >>> render(concat([item, item], blankline))
    '- first item\\n\\n- first item'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Sequence, Union

from ansidoc.constants import DOUBLE_QUOTES, SINGLE_QUOTES

Alignment = Literal["center", "right"]


class Doc:
    """Base class for layout fragments."""

    def __add__(self, other: DocLike) -> Doc:
        return concat([self, other])

    def __radd__(self, other: DocLike) -> Doc:
        return concat([other, self])


DocLike = Union[Doc, str, Sequence["DocLike"]]


@dataclass(frozen=True)
class Empty(Doc):
    """Fragment producing no output."""


@dataclass(frozen=True)
class Text(Doc):
    """Literal text; never broken. Embedded newlines force line breaks."""

    text: str


@dataclass(frozen=True)
class BreakingSpace(Doc):
    """A space the renderer may turn into a line break."""


@dataclass(frozen=True)
class CarriageReturn(Doc):
    """End the current line unless it is empty."""


@dataclass(frozen=True)
class BlankLine(Doc):
    """Request one blank line before the next content.

    Consecutive requests collapse into a single blank line, and requests at
    the very start or end of the output are dropped.
    """


@dataclass(frozen=True)
class Concat(Doc):
    """Sequence of fragments rendered one after another."""

    parts: tuple[Doc, ...]


@dataclass(frozen=True)
class Nest(Doc):
    """Indent every line started inside ``doc`` by ``indent`` columns."""

    indent: int
    doc: Doc


@dataclass(frozen=True)
class Prefixed(Doc):
    """Start every line inside ``doc`` with ``prefix``."""

    prefix: str
    doc: Doc


@dataclass(frozen=True)
class Aligned(Doc):
    """Block rendered at ``width`` columns, each line centered or right-aligned."""

    width: int
    doc: Doc
    how: Alignment = "center"


empty = Empty()
space = BreakingSpace()
cr = CarriageReturn()
blankline = BlankLine()


def to_doc(value: DocLike) -> Doc:
    """Coerce a string, fragment or sequence of fragments to a fragment.

    Raises
    ------
    TypeError
        If ``value`` cannot be interpreted as a fragment

    """
    if isinstance(value, Doc):
        return value
    if isinstance(value, str):
        return literal(value)
    if isinstance(value, (list, tuple)):
        return concat(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a layout fragment")


def literal(text: str) -> Doc:
    """Unbreakable literal text."""
    return Text(text) if text else empty


def concat(docs: Iterable[DocLike], sep: Optional[DocLike] = None) -> Doc:
    """Concatenate fragments, optionally interspersing ``sep`` between them."""
    separator = to_doc(sep) if sep is not None else None
    parts: list[Doc] = []
    for i, doc in enumerate(docs):
        if i and separator is not None:
            parts.append(separator)
        parts.append(to_doc(doc))
    if not parts:
        return empty
    if len(parts) == 1:
        return parts[0]
    return Concat(tuple(parts))


def nest(doc: DocLike, indent: int) -> Doc:
    """Indent lines of ``doc`` by ``indent`` columns."""
    return Nest(indent, to_doc(doc))


def hang(doc: DocLike, indent: int, start: DocLike) -> Doc:
    """Hanging indent: ``start`` on the first line, later lines indented.

    Parameters
    ----------
    doc : DocLike
        Body of the block
    indent : int
        Indentation of the lines after the first
    start : DocLike
        Text placed before the body on the first line (a list marker, a
        footnote label)

    """
    return concat([start, nest(doc, indent)])


def prefixed(doc: DocLike, prefix: str) -> Doc:
    """Start every line of ``doc`` with ``prefix``.

    Blank lines inside ``doc`` carry the prefix with trailing whitespace
    removed.
    """
    return Prefixed(prefix, to_doc(doc))


def cblock(doc: DocLike, width: int) -> Doc:
    """Render ``doc`` as a block of ``width`` columns, lines centered."""
    return Aligned(width, to_doc(doc), "center")


def rblock(doc: DocLike, width: int) -> Doc:
    """Render ``doc`` as a block of ``width`` columns, lines right-aligned."""
    return Aligned(width, to_doc(doc), "right")


def quotes(doc: DocLike) -> Doc:
    """Wrap ``doc`` in typographic single quotes."""
    opening, closing = SINGLE_QUOTES
    return concat([opening, doc, closing])


def double_quotes(doc: DocLike) -> Doc:
    """Wrap ``doc`` in typographic double quotes."""
    opening, closing = DOUBLE_QUOTES
    return concat([opening, doc, closing])
