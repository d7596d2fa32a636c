"""
Core type definitions for tagpath.

This module contains the type aliases shared by the tokenizer, the
expanders and the renderer.
"""

from typing import Any

AttributeMap = dict[str, str]

# Values accepted by the renderer; None and False drop the attribute
RenderAttributes = dict[str, Any]

ArgumentValue = str | int | float | bool | None

# NOTE: the placeholder token is shared by both dialects, with different meanings
PLACEHOLDER = "%"
