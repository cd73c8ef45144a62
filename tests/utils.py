"""Test utilities for the ansidoc test suite.

This module provides small builders for inline content and blocks so tests
can describe documents compactly.
"""

from ansidoc.ast import Paragraph, Plain, Space, Str


def words(text: str) -> list:
    """Build inline content from ``text``, splitting on single spaces."""
    inlines: list = []
    for i, word in enumerate(text.split(" ")):
        if i:
            inlines.append(Space())
        inlines.append(Str(content=word))
    return inlines


def para(text: str) -> Paragraph:
    """Build a paragraph from plain text."""
    return Paragraph(content=words(text))


def plain(text: str) -> Plain:
    """Build a plain block from text."""
    return Plain(content=words(text))
