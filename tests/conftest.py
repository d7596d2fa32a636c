"""
Shared test fixtures and utilities for the tagpath test suite.
"""

import pytest

from tagpath.config import RenderConfig
from tagpath.rendering.renderer import HtmlRenderer


@pytest.fixture
def renderer():
    """Renderer with the default configuration."""
    return HtmlRenderer()


@pytest.fixture
def section_renderer():
    """Renderer that defaults untagged segments to `section` and treats `hr` only as void.

    Usage:
        def test_something(section_renderer):
            assert section_renderer.render("", {}, "") == "<section></section>"
    """
    config = RenderConfig(
        void_elements={"hr"},
        attribute_order=("id", "class"),
        default_tag="section",
    )
    return HtmlRenderer(config)
