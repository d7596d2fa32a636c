"""
Parser for the template dialect.

Templates extend the segment micro-syntax with `%` placeholders and
parenthesized child groups:

    group      := item ('+' item)*
    item       := tag? decoration* content?
    decoration := '#' value | '.' value | '[' name ('=' value)? ']'
    value      := '%' | word characters, '-' and spaces
    content    := '%' | '(' group ')'

The parser only builds the tree; placeholders are filled in by
`tagpath.expansion.template` in the order they appear in the text.
"""

from dataclasses import dataclass, field
from typing import NoReturn

from tagpath.config import DEFAULT_TAG
from tagpath.core.nodes import Decoration, Segment
from tagpath.core.types import PLACEHOLDER
from tagpath.exceptions.core import ErrorContext, MalformedSelectorError
from tagpath.parsing.tokenizer import (
    DECORATION_VALUE_PATTERN,
    NAME_PATTERN,
    split_attribute_body,
)

TAG_STOP_CHARS = frozenset("#.[]()+%")


@dataclass
class TemplateNode:
    """
    One parsed template item.

    Params:
        segment: Tag name and decorations of the item
        children: Parsed `( ... )` group, None when the item has none
        content_placeholder: True when the item ends in a `%` content placeholder
        tag_given: Whether the template named a tag (False means defaulted)
    """

    segment: Segment
    children: list["TemplateNode"] | None = None
    content_placeholder: bool = False
    tag_given: bool = True

    @property
    def is_splice(self) -> bool:
        """A bare `%` item: its argument is inserted without an element around it."""
        return (
            not self.tag_given
            and not self.segment.decorations
            and self.children is None
            and self.content_placeholder
        )


@dataclass
class TemplateParser:
    """Recursive descent parser over one template string."""

    template: str
    default_tag: str = DEFAULT_TAG
    pos: int = field(default=0, init=False)

    def parse(self) -> list[TemplateNode]:
        """
        Parse the whole template.

        Returns:
            Top-level sibling nodes; empty for a blank template

        Raises:
            MalformedSelectorError: If the template does not match the grammar
        """
        self.pos = 0
        if not self.template.strip():
            return []

        nodes = self._parse_group()
        if self.pos < len(self.template):
            self._fail(f"unexpected '{self._peek()}'")
        return nodes

    def _peek(self) -> str:
        if self.pos < len(self.template):
            return self.template[self.pos]
        return ""

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.template) and self.template[self.pos].isspace():
            self.pos += 1

    def _parse_group(self) -> list[TemplateNode]:
        nodes = [self._parse_item()]
        while self._peek() == "+":
            self.pos += 1
            nodes.append(self._parse_item())
        return nodes

    def _parse_item(self) -> TemplateNode:
        start = self.pos
        self._skip_whitespace()

        tag_start = self.pos
        while self.pos < len(self.template) and self._peek() not in TAG_STOP_CHARS:
            self.pos += 1
        tag_name = self.template[tag_start : self.pos].strip()
        if tag_name and not NAME_PATTERN.fullmatch(tag_name):
            self.pos = tag_start
            self._fail(f"invalid tag name '{tag_name}'")

        decorations = []
        while self._peek() in ("#", ".", "["):
            decorations.append(self._parse_decoration())

        node = TemplateNode(
            segment=Segment(
                raw_text="",
                tag_name=tag_name or self.default_tag,
                decorations=decorations,
            ),
            tag_given=bool(tag_name),
        )

        if self._peek() == PLACEHOLDER:
            self.pos += 1
            node.content_placeholder = True
        elif self._peek() == "(":
            self.pos += 1
            node.children = self._parse_group()
            if self._peek() != ")":
                self._fail("unbalanced '('")
            self.pos += 1

        self._skip_whitespace()
        node.segment.raw_text = self.template[start : self.pos].strip()
        if not node.segment.raw_text:
            self._fail("empty segment")
        return node

    def _parse_decoration(self) -> Decoration:
        marker = self._peek()
        marker_pos = self.pos
        self.pos += 1

        if marker == "[":
            end = self.template.find("]", self.pos)
            nested = self.template.find("[", self.pos)
            if end == -1 or (nested != -1 and nested < end):
                self.pos = marker_pos
                self._fail("unterminated attribute bracket")
            body = self.template[self.pos : end]
            self.pos = end + 1
            name, value = split_attribute_body(
                body, selector=self.template, offset=marker_pos
            )
            if value is not None and value.strip() == PLACEHOLDER:
                return Decoration.for_attribute(name, None, placeholder=True)
            return Decoration.for_attribute(name, value)

        if self._peek() == PLACEHOLDER:
            self.pos += 1
            if marker == "#":
                return Decoration.for_id(PLACEHOLDER, placeholder=True)
            return Decoration.for_class(PLACEHOLDER, placeholder=True)

        match = DECORATION_VALUE_PATTERN.match(self.template, self.pos)
        if match is None:
            self.pos = marker_pos
            self._fail(f"'{marker}' must be followed by a name or '%'")
        self.pos = match.end()
        value = match.group().strip()
        if marker == "#":
            return Decoration.for_id(value)
        return Decoration.for_class(value)

    def _fail(self, reason: str) -> NoReturn:
        raise MalformedSelectorError(
            self.template,
            reason,
            ErrorContext(selector=self.template, offset=self.pos),
        )


def parse_template(template: str, default_tag: str = DEFAULT_TAG) -> list[TemplateNode]:
    """Parse a template string into its top-level nodes."""
    return TemplateParser(template, default_tag=default_tag).parse()
