#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/constants.py
"""Constants and defaults shared across the ansidoc package."""

from __future__ import annotations

from typing import Literal

# Terminal geometry
DEFAULT_COLUMNS = 72

WrapMode = Literal["wrap-auto", "wrap-none", "wrap-preserve"]
DEFAULT_WRAP_MODE: WrapMode = "wrap-auto"
WRAP_MODES: tuple[str, ...] = ("wrap-auto", "wrap-none", "wrap-preserve")

# Fixed block renderings
HORIZONTAL_RULE = "* * * * *"
TABLE_PLACEHOLDER = "table omitted"

# Indentation (in columns)
BLOCK_QUOTE_PREFIX = ">"
BLOCK_QUOTE_NEST = 1
BULLET_MARKER = "- "
LIST_ITEM_INDENT = 2
DEFINITION_INDENT = 2
CODE_BLOCK_INDENT = 4
FOOTNOTE_INDENT = 4

# Ordered list marker column widths
NUMBER_WIDTH_WIDE = 4
NUMBER_WIDTH_ROMAN = 5
NUMBER_WIDTH_DEFAULT = 3

# ANSI Control Sequence Introducer
CSI = "\x1b["

SUPERSCRIPT_GLYPHS: dict[str, str] = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "+": "⁺",
    "-": "⁻",
    "=": "⁼",
    "(": "⁽",
    ")": "⁾",
}

# Typographic quotes used for Quoted inlines
SINGLE_QUOTES = ("‘", "’")
DOUBLE_QUOTES = ("“", "”")
