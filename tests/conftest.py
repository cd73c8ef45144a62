"""Pytest configuration and shared fixtures for the ansidoc test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from ansidoc.ast import Document
from ansidoc.options import AnsiOptions
from ansidoc.renderers.ansi import AnsiRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def render():
    """Render blocks to a string, passing keyword arguments to AnsiOptions.

    Returns
    -------
    callable
        ``render(*blocks, **options) -> str``

    """

    def _render(*blocks, **option_overrides) -> str:
        renderer = AnsiRenderer(AnsiOptions(**option_overrides))
        return renderer.render_to_string(Document(children=list(blocks)))

    return _render
