#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/utils/lists.py
"""List numbering and spacing helpers.

Ordered list markers share one column width per list. The width is chosen
from the highest item number and the numbering style only:

- 4 columns when the highest number exceeds 9
- 5 columns for roman styles otherwise
- 3 columns in every other case

A roman list reaching 10 therefore gets 4 columns although ``viii.`` needs
5; such markers overflow the column and are followed by a single space.

"""

from __future__ import annotations

from typing import Sequence

from ansidoc.ast.nodes import Block, ListNumberDelimiter, ListNumberStyle, Plain
from ansidoc.ast.utils import is_list_block
from ansidoc.constants import NUMBER_WIDTH_DEFAULT, NUMBER_WIDTH_ROMAN, NUMBER_WIDTH_WIDE
from ansidoc.layout import Doc, blankline, cr

_ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_STYLES = frozenset({ListNumberStyle.LOWER_ROMAN, ListNumberStyle.UPPER_ROMAN})

_DELIMITER_FORMATS: dict[ListNumberDelimiter, str] = {
    ListNumberDelimiter.DEFAULT: "{}.",
    ListNumberDelimiter.PERIOD: "{}.",
    ListNumberDelimiter.ONE_PAREN: "{})",
    ListNumberDelimiter.TWO_PARENS: "({})",
}


def to_roman(n: int) -> str:
    """Convert ``n`` to upper-case roman numerals.

    Returns ``""`` for 0 and ``"?"`` for values that have no roman form
    (negative numbers and numbers of 4000 or more).
    """
    if n < 0 or n >= 4000:
        return "?"
    result = []
    for value, numeral in _ROMAN_NUMERALS:
        while n >= value:
            result.append(numeral)
            n -= value
    return "".join(result)


def format_number(n: int, style: ListNumberStyle) -> str:
    """Format ``n`` as a bare numeral in ``style``.

    Alphabetic styles wrap after 26 (``27`` is ``a`` again) instead of
    growing extra letters.

    Parameters
    ----------
    n : int
        Item number
    style : ListNumberStyle
        Numbering style

    Returns
    -------
    str
        The numeral without delimiter

    """
    style = ListNumberStyle(style)
    if style is ListNumberStyle.LOWER_ALPHA:
        return chr(ord("a") + (n - 1) % 26)
    if style is ListNumberStyle.UPPER_ALPHA:
        return chr(ord("A") + (n - 1) % 26)
    if style is ListNumberStyle.UPPER_ROMAN:
        return to_roman(n)
    if style is ListNumberStyle.LOWER_ROMAN:
        return to_roman(n).lower()
    # DECIMAL, EXAMPLE and DEFAULT
    return str(n)


def delimit(numeral: str, delimiter: ListNumberDelimiter) -> str:
    """Apply the list delimiter: ``N.``, ``N)`` or ``(N)``."""
    return _DELIMITER_FORMATS[ListNumberDelimiter(delimiter)].format(numeral)


def number_width(highest: int, style: ListNumberStyle) -> int:
    """Column width of the markers of a list whose highest number is ``highest``."""
    if highest > 9:
        return NUMBER_WIDTH_WIDE
    if ListNumberStyle(style) in _ROMAN_STYLES:
        return NUMBER_WIDTH_ROMAN
    return NUMBER_WIDTH_DEFAULT


def pad_marker(marker: str, width: int) -> str:
    """Pad ``marker`` with spaces to ``width``, keeping at least one space."""
    return marker + " " * max(1, width - len(marker))


def ordered_markers(
    start: int, style: ListNumberStyle, delimiter: ListNumberDelimiter, count: int
) -> tuple[int, list[str]]:
    """Compute the hanging prefixes of an ordered list.

    Parameters
    ----------
    start : int
        Number of the first item
    style : ListNumberStyle
        Numbering style
    delimiter : ListNumberDelimiter
        Delimiter format
    count : int
        Number of items

    Returns
    -------
    tuple of (int, list of str)
        The shared marker width and one padded marker per item

    """
    width = number_width(start + count - 1, style)
    markers = [pad_marker(delimit(format_number(n, style), delimiter), width) for n in range(start, start + count)]
    return width, markers


def is_tight(items: Sequence[Sequence[Block]]) -> bool:
    """Return True when no item needs paragraph spacing.

    An item is tight when it is a single Plain block, or a Plain block
    followed by one nested list.
    """
    for item in items:
        if len(item) == 1 and isinstance(item[0], Plain):
            continue
        if len(item) == 2 and isinstance(item[0], Plain) and is_list_block(item[1]):
            continue
        return False
    return True


def item_separator(items: Sequence[Sequence[Block]]) -> Doc:
    """Separator between list items: a line break if tight, a blank line if loose."""
    return cr if is_tight(items) else blankline


__all__ = [
    "to_roman",
    "format_number",
    "delimit",
    "number_width",
    "pad_marker",
    "ordered_markers",
    "is_tight",
    "item_separator",
]
