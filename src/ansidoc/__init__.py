#  Copyright (c) 2025 Tom Villani, Ph.D.
"""ansidoc - render document trees for ANSI terminals.

ansidoc turns a parsed document tree (paragraphs, headers, lists, quotes,
code, emphasis, links, footnotes, ...) into plain text decorated with ANSI
SGR escape sequences, wrapped to a fixed terminal width.

Examples
--------
    >>> from ansidoc import render_ansi
    >>> from ansidoc.ast import Document, Paragraph, Str, Strong
    >>> doc = Document(children=[Paragraph(content=[Strong(content=[Str(content="Hi")])])])
    >>> render_ansi(doc)
    '\\x1b[1mHi\\x1b[22m'

"""

from ansidoc.api import render_ansi
from ansidoc.exceptions import (
    AnsiDocError,
    ConfigurationError,
    InvalidOptionsError,
    RenderingError,
    ValidationError,
)
from ansidoc.options import AnsiOptions
from ansidoc.renderers.ansi import AnsiRenderer

__version__ = "0.1.0"

__all__ = [
    "render_ansi",
    "AnsiRenderer",
    "AnsiOptions",
    "AnsiDocError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "RenderingError",
    "__version__",
]
