#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/utils/footnotes.py
"""Utilities for collecting footnotes while a document is rendered.

Footnotes are numbered in the order their references are met during
rendering and their bodies are rendered after the main text. A
:class:`FootnoteCollector` holds the bodies for exactly one document.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from ansidoc.ast.nodes import Block
from ansidoc.constants import SUPERSCRIPT_GLYPHS
from ansidoc.exceptions import RenderingError

logger = logging.getLogger(__name__)

_SUPERSCRIPT_TABLE = str.maketrans(SUPERSCRIPT_GLYPHS)


def to_superscript(text: str) -> str:
    """Replace digits (and ``+-=()``) with Unicode superscript glyphs.

    Each character is substituted separately, so ``10`` becomes ``¹⁰``.
    Characters without a superscript form are kept.
    """
    return text.translate(_SUPERSCRIPT_TABLE)


def note_marker(index: int, unicode: bool = False) -> str:
    """Inline reference to footnote ``index``: ``[^N]`` or superscript digits."""
    if unicode:
        return to_superscript(str(index))
    return f"[^{index}]"


def note_label(index: int, unicode: bool = False) -> str:
    """Label starting the body of footnote ``index``, including the trailing space."""
    if unicode:
        return f"{to_superscript(str(index))} "
    return f"[^{index}]: "


@dataclass
class FootnoteCollector:
    """Ordered, append-only store of footnote bodies for one document.

    Lifecycle: created empty when a render starts, filled by :meth:`record`
    while inlines are rendered, consumed once by :meth:`drain` after the main
    text, then discarded. Footnotes recorded while drained bodies are being
    rendered (a link inside a footnote) are appended and drained as well.

    Examples
    --------
        >>> notes = FootnoteCollector()
        >>> notes.record([Plain(content=[Str(content="first")])])
        1
        >>> [index for index, _ in notes.drain()]
        [1]

    """

    _notes: List[List[Block]] = field(default_factory=list, init=False, repr=False)
    _drain_started: bool = field(default=False, init=False, repr=False)
    _drain_finished: bool = field(default=False, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._notes)

    @property
    def drained(self) -> bool:
        """True once :meth:`drain` has been called."""
        return self._drain_started

    def record(self, body: Sequence[Block]) -> int:
        """Append a footnote body and return its 1-based index.

        Raises
        ------
        RenderingError
            If the collector has already been fully drained

        """
        if self._drain_finished:
            raise RenderingError("Cannot record a footnote after the footnotes have been drained")
        self._notes.append(list(body))
        index = len(self._notes)
        logger.debug("Recorded footnote %d (%d blocks)", index, len(body))
        return index

    def drain(self) -> Iterator[Tuple[int, List[Block]]]:
        """Consume the store, yielding ``(index, body)`` in recording order.

        Raises
        ------
        RenderingError
            If the collector has already been drained

        """
        if self._drain_started:
            raise RenderingError("Footnotes have already been drained")
        self._drain_started = True
        return self._iter_notes()

    def _iter_notes(self) -> Iterator[Tuple[int, List[Block]]]:
        position = 0
        while position < len(self._notes):
            body = self._notes[position]
            position += 1
            yield position, body
        self._drain_finished = True


__all__ = ["FootnoteCollector", "to_superscript", "note_marker", "note_label"]
