"""
tagpath rendering components.

This package provides the HTML serializer used by both expansion dialects.
"""

from tagpath.rendering.renderer import HtmlRenderer

__all__ = [
    "HtmlRenderer",
]
