#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/layout/__init__.py
"""Layout primitives for fixed-width terminal output.

Renderers compose fragments with the combinators from ``doc`` and hand the
result to :func:`render` together with the terminal width.

"""

from __future__ import annotations

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
    rblock,
    space,
    to_doc,
)
from ansidoc.layout.render import display_width, render, strip_sgr

__all__ = [
    # Fragment types
    "Doc",
    "DocLike",
    "Empty",
    "Text",
    "BreakingSpace",
    "CarriageReturn",
    "BlankLine",
    "Concat",
    "Nest",
    "Prefixed",
    "Aligned",
    # Combinators
    "empty",
    "space",
    "cr",
    "blankline",
    "literal",
    "to_doc",
    "concat",
    "nest",
    "hang",
    "prefixed",
    "cblock",
    "rblock",
    "quotes",
    "double_quotes",
    # Rendering
    "render",
    "display_width",
    "strip_sgr",
]
