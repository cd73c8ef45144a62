#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helper modules used by the ANSI renderer.

- font_effects: ANSI SGR font effect encoding
- lists: ordered list numbering and list spacing
- footnotes: per-document footnote store and markers
- io_utils: writing rendered text to paths and streams

"""
