"""
tagpath - expand CSS-selector-like shorthand into HTML

tagpath provides a path dialect (`nest`) and a template dialect with
positional placeholders (`zz`) for building element trees in one call.
"""

from importlib.metadata import version

from tagpath.config import RenderConfig
from tagpath.exceptions import (
    ArgumentExhaustedError,
    MalformedSelectorError,
    TagPathError,
)
from tagpath.html import br, li, nest, p, tag, zz
from tagpath.rendering import HtmlRenderer

__version__ = version("tagpath")

__all__ = [
    "__version__",
    "nest",
    "zz",
    "tag",
    "br",
    "li",
    "p",
    "HtmlRenderer",
    "RenderConfig",
    "TagPathError",
    "MalformedSelectorError",
    "ArgumentExhaustedError",
]
