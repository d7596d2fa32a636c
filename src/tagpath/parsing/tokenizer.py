"""
Selector tokenizer shared by both expansion dialects.

This module splits one selector segment such as
`table#some-id.my-class[disabled][data-id=8]` into its bare tag name and the
ordered list of id, class and attribute decorations that follow it.
"""

import re

from tagpath.config import DEFAULT_TAG
from tagpath.core.nodes import Decoration, Segment
from tagpath.core.types import PLACEHOLDER, AttributeMap
from tagpath.exceptions.core import ErrorContext, MalformedSelectorError

# `#value` / `.value` (values may contain spaces) or a bracketed `[name=value]`
DECORATION_PATTERN = re.compile(
    r"(?P<marker>[#.])(?P<value>[\w\- ]+)|\[(?P<body>[^\[\]]*)\]"
)

DECORATION_VALUE_PATTERN = re.compile(r"[\w\- ]+")

# Tag and attribute names; anything else could break out of the markup
NAME_PATTERN = re.compile(r"[\w:-]+")


def validate_name(
    name: str, kind: str, *, selector: str, segment: str, offset: int | None = None
) -> str:
    """
    Check that a tag or attribute name is safe to emit unescaped.

    Params:
        name: Stripped tag or attribute name
        kind: "tag" or "attribute", used in the error message
        selector: Full selector, for error reporting
        segment: Segment the name came from
        offset: Offset of the segment in `selector`

    Returns:
        The name unchanged

    Raises:
        MalformedSelectorError: If the name holds characters outside `[\w:-]`
    """
    if not NAME_PATTERN.fullmatch(name):
        raise MalformedSelectorError(
            selector,
            f"invalid {kind} name '{name}'",
            ErrorContext(selector=selector, segment=segment, offset=offset),
        )
    return name


def split_attribute_body(
    body: str, *, selector: str | None = None, offset: int | None = None
) -> tuple[str, str | None]:
    """
    Split the inside of an `[...]` decoration into name and value.

    The body is split on the first `=` only, so values may contain further
    `=` characters. A body without `=` yields a None value.

    Params:
        body: Text between the brackets
        selector: Full selector, used for error reporting
        offset: Offset of the opening bracket in `selector`

    Returns:
        Tuple of (attribute name, value or None)

    Raises:
        MalformedSelectorError: If the attribute name is empty or invalid
    """
    name, separator, value = body.partition("=")
    name = name.strip()
    if not name:
        raise MalformedSelectorError(
            selector if selector is not None else f"[{body}]",
            "attribute name is empty",
            ErrorContext(selector=selector, segment=f"[{body}]", offset=offset),
        )
    validate_name(
        name,
        "attribute",
        selector=selector if selector is not None else f"[{body}]",
        segment=f"[{body}]",
        offset=offset,
    )
    return name, value if separator else None


def tokenize(
    segment_text: str,
    *,
    selector: str | None = None,
    offset: int = 0,
    default_tag: str = DEFAULT_TAG,
) -> tuple[str, list[Decoration]]:
    """
    Split one segment into its tag name and decorations.

    The tag name is everything before the first decoration. When that prefix
    is empty the default tag is used, so `.card` resolves to a `div`.

    Params:
        segment_text: One segment, without `/` or `+` separators
        selector: Full selector the segment came from, for error reporting
        offset: Offset of the segment inside `selector`
        default_tag: Tag name used when the segment names none

    Returns:
        Tuple of (tag name, decorations in encounter order)

    Raises:
        MalformedSelectorError: On unterminated brackets or empty or invalid names

    Examples:
        "a#my.link[href=#]" -> ("a", [Id("my"), Class("link"), Attribute("href", "#")])
        "table#some-id sss" -> ("table", [Id("some-id sss")])
    """
    decorations = []
    prefix_end = len(segment_text)
    covered = []

    for match in DECORATION_PATTERN.finditer(segment_text):
        prefix_end = min(prefix_end, match.start())
        covered.append(match.span())

        marker = match.group("marker")
        if marker and not match.group("value").strip():
            # `. ` or `# ` contributes nothing
            continue
        if marker == "#":
            decorations.append(Decoration.for_id(match.group("value").strip()))
        elif marker == ".":
            decorations.append(Decoration.for_class(match.group("value").strip()))
        else:
            name, value = split_attribute_body(
                match.group("body"), selector=selector, offset=offset + match.start()
            )
            decorations.append(Decoration.for_attribute(name, value))

    _check_brackets(segment_text, covered, selector, offset)

    tag_name = segment_text[:prefix_end].strip()
    if tag_name and tag_name != PLACEHOLDER:
        validate_name(
            tag_name,
            "tag",
            selector=selector if selector is not None else segment_text,
            segment=segment_text,
            offset=offset,
        )
    return tag_name or default_tag, decorations


def tokenize_segment(
    segment_text: str,
    *,
    selector: str | None = None,
    offset: int = 0,
    default_tag: str = DEFAULT_TAG,
) -> Segment:
    tag_name, decorations = tokenize(
        segment_text, selector=selector, offset=offset, default_tag=default_tag
    )
    return Segment(raw_text=segment_text, tag_name=tag_name, decorations=decorations)


def _check_brackets(
    segment_text: str,
    covered: list[tuple[int, int]],
    selector: str | None,
    offset: int,
) -> None:
    """Reject `[` or `]` characters that are not part of a complete decoration."""
    position = 0
    for start, end in covered + [(len(segment_text), len(segment_text))]:
        for index in range(position, start):
            char = segment_text[index]
            if char == "[":
                reason = "unterminated attribute bracket"
            elif char == "]":
                reason = "unexpected ']'"
            else:
                continue
            raise MalformedSelectorError(
                selector if selector is not None else segment_text,
                reason,
                ErrorContext(
                    selector=selector if selector is not None else segment_text,
                    segment=segment_text,
                    offset=offset + index,
                ),
            )
        position = end


def format_selector(tag_name: str, attributes: AttributeMap) -> str:
    """
    Build selector text that tokenizes back into `tag_name` and `attributes`.

    Ids and classes use the `#` / `.` shorthand, every other attribute the
    bracket form. Values containing `]` or `=` in names cannot round-trip.

    Params:
        tag_name: Element name
        attributes: Attribute map, as produced by `accumulate`

    Returns:
        Selector text, e.g. `table#some-id.my-class[data-id=8]`
    """
    parts = [tag_name]
    for name, value in attributes.items():
        if name == "id":
            parts.append(f"#{value}")
        elif name == "class":
            parts.append(f".{value}")
        elif value == name:
            parts.append(f"[{name}]")
        else:
            parts.append(f"[{name}={value}]")
    return "".join(parts)
