"""
Selector data structures.

This module defines the structures that flow between the tokenizer, the
attribute accumulator and the expanders: decorations parsed from a segment,
the segment itself, and the resolved node handed to the renderer.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from pydantic import BaseModel, ConfigDict

from tagpath.core.types import RenderAttributes


class DecorationKind(Enum):
    """Type of segment decoration."""

    ID = "#"
    CLASS = "."
    ATTRIBUTE = "["


@dataclass(frozen=True)
class Decoration:
    """
    One id, class or attribute modifier attached to a segment.

    Params:
        kind: Which decoration syntax produced this entry
        value: Decoration value, None for a bare `[name]` attribute
        name: Attribute name (ATTRIBUTE decorations only)
        placeholder: True when the value is a `%` to be filled from arguments
    """

    kind: DecorationKind
    value: str | None
    name: str = ""
    placeholder: bool = False

    @classmethod
    def for_id(cls, value: str, placeholder: bool = False) -> "Decoration":
        return cls(DecorationKind.ID, value, placeholder=placeholder)

    @classmethod
    def for_class(cls, value: str, placeholder: bool = False) -> "Decoration":
        return cls(DecorationKind.CLASS, value, placeholder=placeholder)

    @classmethod
    def for_attribute(
        cls, name: str, value: str | None = None, placeholder: bool = False
    ) -> "Decoration":
        return cls(DecorationKind.ATTRIBUTE, value, name=name, placeholder=placeholder)

    @property
    def attribute_name(self) -> str:
        """Name of the attribute this decoration contributes to."""
        if self.kind == DecorationKind.ID:
            return "id"
        if self.kind == DecorationKind.CLASS:
            return "class"
        return self.name

    def with_value(self, value: str) -> "Decoration":
        """Return a copy with a concrete value and the placeholder flag cleared."""
        return replace(self, value=value, placeholder=False)


@dataclass
class Segment:
    """
    One selector atom resolving to a single element.

    Params:
        raw_text: Segment text exactly as it appeared in the selector
        tag_name: Element name ("div" when the selector named none)
        decorations: Decorations in encounter order
    """

    raw_text: str
    tag_name: str
    decorations: list[Decoration] = field(default_factory=list)


class Node(BaseModel):
    """
    A resolved element ready for rendering.

    Nodes are built bottom-up; `content` is already serialized markup of the
    children (or raw caller content) and is never re-escaped.
    """

    model_config = ConfigDict(frozen=True)

    tag_name: str
    attributes: RenderAttributes = {}
    content: str = ""
