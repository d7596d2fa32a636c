"""
Path dialect expansion.

Expands selector chains such as `div.step/div.circle+p` into nested markup.
`/` nests the right-hand side inside the left-hand side, `+` places segments
side by side, and a segment consisting of `%` is replaced by the content
built so far instead of being wrapped in an element.
"""

import logging

from tagpath.core.nodes import Node
from tagpath.core.types import AttributeMap
from tagpath.parsing.attributes import accumulate, merge_root_overrides
from tagpath.parsing.tokenizer import tokenize_segment
from tagpath.rendering.renderer import HtmlRenderer

logger = logging.getLogger(__name__)

NEST_SEPARATOR = "/"
SIBLING_SEPARATOR = "+"

# Segment tag that splices the current content in place of an element
SPLICE_TAG = "%"


def _split(text: str, separator: str, base_offset: int) -> list[tuple[str, int]]:
    """
    Split `text` on `separator` outside `[...]` brackets, keeping offsets.

    Separators inside an attribute bracket belong to the value, so
    `a[href=/home]` stays one segment. Blank parts are dropped.
    """
    parts = []
    start = 0
    depth = 0
    for index, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        elif char == separator and not depth:
            parts.append((text[start:index], base_offset + start))
            start = index + 1
    parts.append((text[start:], base_offset + start))
    return [(part, offset) for part, offset in parts if part.strip()]


def expand(
    path: str,
    leaf_content: str = "",
    root_overrides: AttributeMap | None = None,
    renderer: HtmlRenderer | None = None,
) -> str:
    """
    Expand a path selector into markup.

    Groups separated by `/` are processed innermost (rightmost) first. Within
    a group every sibling but the last renders empty and the last one wraps
    the content built so far; the group's output then becomes the content of
    the group to its left.

    Params:
        path: Selector chain, e.g. `div#wrapper/a.link[href=#]`
        leaf_content: Content placed inside the innermost element
        root_overrides: Attributes merged into the outermost element; `class`
            is appended to the computed class, other keys replace
        renderer: Renderer to use, defaults to a standard `HtmlRenderer`

    Returns:
        The rendered markup, or "" for a blank path

    Raises:
        MalformedSelectorError: If a segment has a broken attribute bracket

    Examples:
        expand(".step/.circle+p", "10")
        -> '<div class="step"><div class="circle"></div><p>10</p></div>'
    """
    renderer = renderer or HtmlRenderer()
    groups = _split(path, NEST_SEPARATOR, 0)
    if not groups:
        return ""

    logger.debug("Expanding path %r with %d group(s)", path, len(groups))

    content = "" if leaf_content is None else str(leaf_content)
    for group_index in range(len(groups) - 1, -1, -1):
        group_text, group_offset = groups[group_index]
        siblings = _split(group_text, SIBLING_SEPARATOR, group_offset)
        is_outermost = group_index == 0

        rendered = []
        for sibling_index, (segment_text, segment_offset) in enumerate(siblings):
            is_last = sibling_index == len(siblings) - 1
            segment = tokenize_segment(
                segment_text,
                selector=path,
                offset=segment_offset,
                default_tag=renderer.config.default_tag,
            )

            if segment.tag_name == SPLICE_TAG:
                rendered.append(content)
                continue

            attributes = accumulate(segment.decorations)
            if is_outermost and is_last:
                attributes = merge_root_overrides(attributes, root_overrides)

            node = Node(
                tag_name=segment.tag_name,
                attributes=attributes,
                content=content if is_last else "",
            )
            rendered.append(renderer.render_node(node))

        content = "".join(rendered)

    return content
