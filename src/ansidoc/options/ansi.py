#  Copyright (c) 2025 Tom Villani, Ph.D.
# ansidoc/options/ansi.py
"""Configuration options for ANSI terminal rendering.

This module defines options for rendering AST documents to text decorated
with ANSI SGR escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ansidoc.constants import DEFAULT_COLUMNS, DEFAULT_WRAP_MODE, WRAP_MODES, WrapMode
from ansidoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AnsiOptions(BaseRendererOptions):
    """Configuration options for ANSI terminal rendering.

    Parameters
    ----------
    italic : bool, default False
        Render emphasis in italics instead of underlined.
    unicode : bool, default False
        Mark footnotes with superscript digits (``¹``) instead of ``[^1]``.
    columns : int, default 72
        Terminal width in columns. Used for line wrapping and for centering
        level 1 and 2 headers and horizontal rules.
    wrap_text : {"wrap-auto", "wrap-none", "wrap-preserve"}, default "wrap-auto"
        Line wrapping mode:
        - "wrap-auto": wrap lines at ``columns``; soft breaks become spaces
        - "wrap-none": never wrap; soft breaks become spaces
        - "wrap-preserve": wrap at ``columns``; soft breaks become line breaks

    Examples
    --------
        >>> from ansidoc.ast import Document, Emph, Paragraph, Str
        >>> from ansidoc.renderers.ansi import AnsiRenderer
        >>> doc = Document(children=[Paragraph(content=[Emph(content=[Str(content="hi")])])])
        >>> AnsiRenderer(AnsiOptions(italic=True)).render_to_string(doc)
        '\\x1b[3mhi\\x1b[23m'

    """

    italic: bool = field(
        default=False,
        metadata={"help": "Render emphasis in italics instead of underlined", "importance": "core"},
    )
    unicode: bool = field(
        default=False,
        metadata={"help": "Use superscript digits as footnote markers", "importance": "core"},
    )
    columns: int = field(
        default=DEFAULT_COLUMNS,
        metadata={"help": "Terminal width in columns", "type": int, "importance": "core"},
    )
    wrap_text: WrapMode = field(
        default=DEFAULT_WRAP_MODE,
        metadata={
            "help": "Line wrapping mode: wrap-auto, wrap-none or wrap-preserve",
            "choices": list(WRAP_MODES),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``columns`` is not positive or ``wrap_text`` is unknown.

        """
        super().__post_init__()
        if self.columns < 1:
            raise ValueError(f"columns must be at least 1, got {self.columns}")
        if self.wrap_text not in WRAP_MODES:
            raise ValueError(f"wrap_text must be one of {', '.join(WRAP_MODES)}, got {self.wrap_text!r}")
