#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/layout/render.py
"""Width-aware rendering of layout fragments to text.

The renderer streams over the fragment tree and keeps a single open line.
Words (runs of literal text not separated by a breakable space) are buffered
so a line is only ever broken at a breakable space, and the width check sees
the whole word including any escape sequences glued to it.

Display width ignores ANSI SGR sequences and counts terminal cells, so wide
East Asian characters take two columns.

"""

from __future__ import annotations

import re
from typing import Optional

from rich.cells import cell_len

from ansidoc.layout.doc import (
    Aligned,
    BlankLine,
    BreakingSpace,
    CarriageReturn,
    Concat,
    Doc,
    DocLike,
    Empty,
    Nest,
    Prefixed,
    Text,
    to_doc,
)

_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_sgr(text: str) -> str:
    """Remove ANSI SGR escape sequences from ``text``."""
    return _SGR_PATTERN.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return cell_len(strip_sgr(text))


class _LineRenderer:
    """Stateful line builder used by :func:`render`."""

    def __init__(self, width: Optional[int]):
        self.width = width
        self.lines: list[str] = []
        self._line: Optional[str] = None
        self._prefix = ""
        self._word: list[str] = []
        self._pending_space = False
        self._pending_blank = False

    def feed(self, doc: Doc) -> None:
        if isinstance(doc, Text):
            self._text(doc.text)
        elif isinstance(doc, Concat):
            for part in doc.parts:
                self.feed(part)
        elif isinstance(doc, BreakingSpace):
            self._flush_word()
            self._pending_space = self._line is not None
        elif isinstance(doc, CarriageReturn):
            self._carriage_return()
        elif isinstance(doc, BlankLine):
            self._carriage_return()
            self._pending_blank = True
        elif isinstance(doc, Nest):
            self._with_prefix(" " * doc.indent, doc.doc)
        elif isinstance(doc, Prefixed):
            self._with_prefix(doc.prefix, doc.doc)
        elif isinstance(doc, Aligned):
            self._aligned(doc)
        elif isinstance(doc, Empty):
            pass
        else:
            raise TypeError(f"Unknown layout fragment: {type(doc).__name__}")

    def finish(self) -> list[str]:
        self._carriage_return()
        while self.lines and not self.lines[-1]:
            self.lines.pop()
        return self.lines

    def _text(self, text: str) -> None:
        for i, part in enumerate(text.split("\n")):
            if i:
                self._hard_newline()
            if part:
                self._word.append(part)

    def _flush_word(self) -> None:
        if not self._word:
            return
        word = "".join(self._word)
        self._word = []
        if self._line is None:
            self._start_line()
        elif self._pending_space:
            if self._fits(word):
                self._line += " "
            else:
                self._end_line()
                self._start_line()
        assert self._line is not None
        self._line += word
        self._pending_space = False

    def _fits(self, word: str) -> bool:
        if self.width is None or self._line is None:
            return True
        return display_width(self._line) + 1 + display_width(word) <= self.width

    def _start_line(self) -> None:
        if self._pending_blank and self.lines:
            self.lines.append(self._prefix.rstrip())
        self._pending_blank = False
        self._line = self._prefix

    def _end_line(self) -> None:
        assert self._line is not None
        self.lines.append(self._line.rstrip())
        self._line = None
        self._pending_space = False

    def _carriage_return(self) -> None:
        self._flush_word()
        if self._line is not None:
            self._end_line()
        self._pending_space = False

    def _hard_newline(self) -> None:
        self._flush_word()
        if self._line is None:
            self._start_line()
        self._end_line()

    def _with_prefix(self, prefix: str, doc: Doc) -> None:
        self._flush_word()
        saved = self._prefix
        self._prefix = saved + prefix
        try:
            self.feed(doc)
            self._flush_word()
        finally:
            self._prefix = saved

    def _aligned(self, doc: Aligned) -> None:
        self._carriage_return()
        inner = _LineRenderer(doc.width)
        inner.feed(doc.doc)
        for line in inner.finish():
            self._start_line()
            if line:
                used = display_width(line)
                shift = max(0, doc.width - used)
                if doc.how == "center":
                    shift //= 2
                self._line = f"{self._line}{' ' * shift}{line}"
            self._end_line()


def render(doc: DocLike, width: Optional[int] = None) -> str:
    """Render a layout fragment to text.

    Parameters
    ----------
    doc : DocLike
        Fragment (or string, or sequence of fragments) to render
    width : int or None, default = None
        Column width used for line wrapping. ``None`` disables wrapping.

    Returns
    -------
    str
        Rendered lines joined by newlines, without leading or trailing blank
        lines and without trailing whitespace on any line

    Raises
    ------
    ValueError
        If ``width`` is smaller than 1

    """
    if width is not None and width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    renderer = _LineRenderer(width)
    renderer.feed(to_doc(doc))
    return "\n".join(renderer.finish())
