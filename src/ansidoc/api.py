#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/api.py
"""Top-level rendering entry point."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ansidoc.ast import Document
from ansidoc.options import AnsiOptions
from ansidoc.renderers.ansi import AnsiRenderer

logger = logging.getLogger(__name__)


def render_ansi(
    document: Document,
    columns: Optional[int] = None,
    options: Optional[AnsiOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a document to text decorated with ANSI escape sequences.

    Parameters
    ----------
    document : Document
        Parsed document tree
    columns : int, optional
        Terminal width; overrides ``options.columns`` when given
    options : AnsiOptions, optional
        Rendering options; defaults are used when omitted
    **kwargs : Any
        Individual option overrides, e.g. ``italic=True``

    Returns
    -------
    str
        Rendered text

    Raises
    ------
    ValueError
        If the resulting options are invalid
    TypeError
        If a keyword does not name an option

    Examples
    --------
        >>> from ansidoc.ast import Document, Header, Str
        >>> text = render_ansi(Document(children=[Header(level=1, content=[Str(content="Hi")])]), columns=20)

    """
    options = options or AnsiOptions()
    if columns is not None:
        kwargs["columns"] = columns
    if kwargs:
        logger.debug("Overriding ANSI options: %s", ", ".join(sorted(kwargs)))
        options = options.create_updated(**kwargs)
    return AnsiRenderer(options).render_to_string(document)
