"""
tagpath expansion engines.

This package provides the path dialect (`expand`) and the template dialect
(`render`) expanders.
"""

from tagpath.expansion.path import SPLICE_TAG, expand
from tagpath.expansion.template import (
    ArgumentCursor,
    omit_on_null,
    render,
    resolve_group,
    resolve_node,
)

__all__ = [
    "SPLICE_TAG",
    "expand",
    "ArgumentCursor",
    "omit_on_null",
    "render",
    "resolve_group",
    "resolve_node",
]
