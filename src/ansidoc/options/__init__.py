#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration options."""

from ansidoc.options.ansi import AnsiOptions
from ansidoc.options.base import BaseRendererOptions, CloneFrozenMixin

__all__ = ["AnsiOptions", "BaseRendererOptions", "CloneFrozenMixin"]
