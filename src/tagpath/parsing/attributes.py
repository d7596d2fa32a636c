"""
Attribute accumulation for selector segments.

This module merges the decorations of one segment into a single attribute
map. Ids and classes collect every contribution and space-join them in
encounter order; other attributes simply overwrite earlier values.
"""

from collections.abc import Iterable

from tagpath.core.nodes import Decoration, DecorationKind
from tagpath.core.types import AttributeMap

JOINED_ATTRIBUTES = ("id", "class")


class AttributeAccumulator:
    """
    Incremental builder for one element's attribute map.

    The template expander feeds it decoration by decoration so that it can
    drop attributes whose placeholder resolved to None; the path expander
    uses `accumulate` which feeds a whole segment at once.
    """

    def __init__(self):
        self._values: dict[str, str | list[str]] = {}

    def add(self, decoration: Decoration) -> None:
        """
        Add one decoration.

        Bare `[name]` attributes take their own name as value.

        Params:
            decoration: Decoration with a concrete (non-placeholder) value
        """
        name = decoration.attribute_name
        value = decoration.value if decoration.value is not None else name

        if decoration.kind == DecorationKind.ATTRIBUTE and name == "id":
            self._values[name] = [value]
        elif name in JOINED_ATTRIBUTES:
            self._join(name, value)
        else:
            self._values[name] = value

    def omit(self, decoration: Decoration) -> None:
        """
        Record that a decoration resolved to None.

        A plain attribute is removed entirely, including any value set by an
        earlier decoration. For id and class only this contribution is
        dropped; other contributions to the same attribute are kept.
        """
        name = decoration.attribute_name
        if decoration.kind != DecorationKind.ATTRIBUTE or name == "class":
            return
        self._values.pop(name, None)

    def build(self) -> AttributeMap:
        """Return the attribute map, joining id and class contributions."""
        attributes = {}
        for name, value in self._values.items():
            if isinstance(value, list):
                joined = " ".join(part for part in value if part)
                attributes[name] = joined
            else:
                attributes[name] = value
        return attributes

    def _join(self, name: str, value: str) -> None:
        existing = self._values.get(name)
        if isinstance(existing, list):
            existing.append(value)
        else:
            self._values[name] = [value]


def accumulate(decorations: Iterable[Decoration]) -> AttributeMap:
    """
    Merge decorations into one attribute map.

    Params:
        decorations: Decorations in encounter order

    Returns:
        Attribute map; `class` is absent unless a class was requested

    Examples:
        [Id("some-id"), Id("sss"), Class("a"), Attribute("class", "b")]
        -> {"id": "some-id sss", "class": "a b"}
    """
    accumulator = AttributeAccumulator()
    for decoration in decorations:
        accumulator.add(decoration)
    return accumulator.build()


def merge_root_overrides(
    attributes: AttributeMap, overrides: AttributeMap | None
) -> AttributeMap:
    """
    Merge caller-supplied overrides into the outermost element's attributes.

    The override class is appended after the computed class; every other
    override key replaces or adds to the computed value.

    Params:
        attributes: Attributes computed from the selector
        overrides: Caller overrides, may be None or empty

    Returns:
        A new attribute map
    """
    if not overrides:
        return dict(attributes)

    merged = dict(attributes)
    for name, value in overrides.items():
        if name == "class" and merged.get("class") and value:
            merged["class"] = f"{merged['class']} {value}"
        else:
            merged[name] = value
    return merged
