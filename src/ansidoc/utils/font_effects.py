#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/utils/font_effects.py
"""ANSI SGR font effects.

Each effect has a start code and a stop code. Wrapping a fragment with a set
of effects emits one escape sequence with all start codes before it and one
with all stop codes after it, in the order the effects were given.

Nested calls simply produce nested escape pairs; a stop code such as 22
cancels both bold and faint, and sorting that out is left to the terminal.

Examples
--------
    >>> from ansidoc.layout import render
    >>> render(font(["bold", "underline"], "x"))
    '\\x1b[1;4mx\\x1b[22;24m'

"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

from ansidoc.constants import CSI
from ansidoc.exceptions import ConfigurationError
from ansidoc.layout import Doc, DocLike, concat


class FontEffect(str, Enum):
    """Terminal font effects supported by the renderer."""

    BOLD = "bold"
    FAINT = "faint"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    INVERSE = "inverse"
    STRIKEOUT = "strikeout"

    @property
    def start_code(self) -> str:
        return _EFFECT_CODES[self][0]

    @property
    def stop_code(self) -> str:
        return _EFFECT_CODES[self][1]


_EFFECT_CODES: dict[FontEffect, tuple[str, str]] = {
    FontEffect.BOLD: ("1", "22"),
    FontEffect.FAINT: ("2", "22"),
    FontEffect.ITALIC: ("3", "23"),
    FontEffect.UNDERLINE: ("4", "24"),
    FontEffect.BLINK: ("5", "25"),
    FontEffect.INVERSE: ("7", "27"),
    FontEffect.STRIKEOUT: ("9", "29"),
}

_EFFECT_ALIASES: dict[str, FontEffect] = {
    "underlined": FontEffect.UNDERLINE,
}

EffectLike = Union[FontEffect, str]


def resolve_effect(effect: EffectLike) -> FontEffect:
    """Resolve an effect name to a :class:`FontEffect`.

    Parameters
    ----------
    effect : FontEffect or str
        Effect or its name; names are case-insensitive and ``underlined`` is
        accepted as a synonym for ``underline``

    Returns
    -------
    FontEffect
        The resolved effect

    Raises
    ------
    ConfigurationError
        If the name does not denote a known effect

    """
    if isinstance(effect, FontEffect):
        return effect
    name = str(effect).strip().lower()
    if name in _EFFECT_ALIASES:
        return _EFFECT_ALIASES[name]
    try:
        return FontEffect(name)
    except ValueError as e:
        raise ConfigurationError(f"Unknown font effect {effect!r}", effect=effect, original_error=e) from e


def sgr(codes: Sequence[str]) -> str:
    """Build a single SGR escape sequence from numeric codes."""
    return f"{CSI}{';'.join(codes)}m"


def font(effects: Union[EffectLike, Sequence[EffectLike]], body: DocLike) -> Doc:
    """Wrap ``body`` in the start and stop sequences of ``effects``.

    Parameters
    ----------
    effects : FontEffect, str, or sequence of them
        One effect or a non-empty sequence of effects
    body : DocLike
        Fragment to decorate

    Returns
    -------
    Doc
        Start sequence, body, stop sequence

    Raises
    ------
    ConfigurationError
        If an effect is unknown or the sequence is empty

    """
    if isinstance(effects, (FontEffect, str)):
        effects = [effects]
    resolved = [resolve_effect(effect) for effect in effects]
    if not resolved:
        raise ConfigurationError("At least one font effect is required", effect=effects)

    start = sgr([effect.start_code for effect in resolved])
    stop = sgr([effect.stop_code for effect in resolved])
    return concat([start, body, stop])


__all__ = ["FontEffect", "EffectLike", "resolve_effect", "sgr", "font"]
