#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting the ansidoc AST to output text."""

from ansidoc.renderers.ansi import AnsiRenderer
from ansidoc.renderers.base import BaseRenderer

__all__ = ["AnsiRenderer", "BaseRenderer"]
