"""
tagpath parsing components.

This package provides the segment tokenizer, attribute accumulation and the
template dialect parser.
"""

from tagpath.parsing.attributes import (
    AttributeAccumulator,
    accumulate,
    merge_root_overrides,
)
from tagpath.parsing.template_parser import (
    TemplateNode,
    TemplateParser,
    parse_template,
)
from tagpath.parsing.tokenizer import (
    format_selector,
    split_attribute_body,
    tokenize,
    tokenize_segment,
    validate_name,
)

__all__ = [
    "AttributeAccumulator",
    "accumulate",
    "merge_root_overrides",
    "TemplateNode",
    "TemplateParser",
    "parse_template",
    "format_selector",
    "split_attribute_body",
    "tokenize",
    "tokenize_segment",
    "validate_name",
]
