"""
Template dialect expansion.

Renders templates such as `div.card(a[href=%]%)` by filling each `%`
placeholder from a list of positional arguments. Placeholders are consumed in
the order they appear in the template text, across siblings and nested
groups alike, through one `ArgumentCursor` per call.

Two policies apply to resolved arguments and are kept separate:
  - `omit_on_null`: an attribute whose placeholder receives None is not
    rendered at all, while an empty string renders as `name=""`.
  - splicing: a bare `%` item inserts its argument without an element.
"""

import logging
from collections.abc import Sequence

from tagpath.core.nodes import Node
from tagpath.core.types import ArgumentValue
from tagpath.exceptions.core import ArgumentExhaustedError
from tagpath.parsing.attributes import AttributeAccumulator
from tagpath.parsing.template_parser import TemplateNode, parse_template
from tagpath.rendering.renderer import HtmlRenderer

logger = logging.getLogger(__name__)


class ArgumentCursor:
    """
    Read position over the positional arguments of one render call.

    The cursor is created per call and passed into every recursive step, so
    sibling and nested groups draw from the same sequence.
    """

    def __init__(self, arguments: Sequence[ArgumentValue], template: str | None = None):
        self._arguments = tuple(arguments)
        self._position = 0
        self._template = template

    def next(self) -> ArgumentValue:
        """
        Consume and return the next argument.

        Raises:
            ArgumentExhaustedError: If every argument has been consumed
        """
        if self._position >= len(self._arguments):
            raise ArgumentExhaustedError(self._template, len(self._arguments))
        value = self._arguments[self._position]
        self._position += 1
        return value

    @property
    def consumed(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._arguments) - self._position


def _as_text(value: ArgumentValue) -> str:
    return "" if value is None else str(value)


def omit_on_null(value: ArgumentValue) -> bool:
    """Whether an attribute placeholder resolving to `value` drops the attribute."""
    return value is None


def resolve_node(node: TemplateNode, cursor: ArgumentCursor, renderer: HtmlRenderer) -> str:
    """
    Render one template node and its children.

    Decorations are resolved before content, matching their textual order.

    Params:
        node: Parsed template node
        cursor: Shared argument cursor for the whole render call
        renderer: Renderer producing the element markup

    Returns:
        Markup for the node (or the raw argument for a splice node)
    """
    accumulator = AttributeAccumulator()
    for decoration in node.segment.decorations:
        if not decoration.placeholder:
            accumulator.add(decoration)
            continue
        value = cursor.next()
        if omit_on_null(value):
            accumulator.omit(decoration)
        else:
            accumulator.add(decoration.with_value(_as_text(value)))

    if node.children is not None:
        content = resolve_group(node.children, cursor, renderer)
    elif node.content_placeholder:
        content = _as_text(cursor.next())
    else:
        content = ""

    if node.is_splice:
        return content

    resolved = Node(
        tag_name=node.segment.tag_name,
        attributes=accumulator.build(),
        content=content,
    )
    return renderer.render_node(resolved)


def resolve_group(
    nodes: list[TemplateNode], cursor: ArgumentCursor, renderer: HtmlRenderer
) -> str:
    return "".join(resolve_node(node, cursor, renderer) for node in nodes)


def render(
    template: str,
    arguments: Sequence[ArgumentValue] = (),
    renderer: HtmlRenderer | None = None,
) -> str:
    """
    Render a template, filling placeholders from `arguments`.

    Params:
        template: Template text, e.g. `.buttons(button.link%+button.btn%)`
        arguments: Positional values; None omits an attribute or renders
            empty content, other values are converted with `str()`
        renderer: Renderer to use, defaults to a standard `HtmlRenderer`

    Returns:
        The rendered markup, or "" for a blank template

    Raises:
        MalformedSelectorError: If the template does not match the grammar
        ArgumentExhaustedError: If there are more placeholders than arguments
    """
    renderer = renderer or HtmlRenderer()
    nodes = parse_template(template, default_tag=renderer.config.default_tag)

    cursor = ArgumentCursor(arguments, template=template)
    markup = resolve_group(nodes, cursor, renderer)

    if cursor.remaining:
        logger.debug(
            "Template %r used %d of %d argument(s)",
            template,
            cursor.consumed,
            cursor.consumed + cursor.remaining,
        )
    return markup
