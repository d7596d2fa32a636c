"""
Core tagpath components.

This package provides the data structures and type definitions shared by
the parsing, expansion and rendering packages.
"""

from tagpath.core.nodes import Decoration, DecorationKind, Node, Segment
from tagpath.core.types import (
    PLACEHOLDER,
    ArgumentValue,
    AttributeMap,
    RenderAttributes,
)

__all__ = [
    "Decoration",
    "DecorationKind",
    "Node",
    "Segment",
    "PLACEHOLDER",
    "ArgumentValue",
    "AttributeMap",
    "RenderAttributes",
]
