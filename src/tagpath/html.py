"""Public helpers for building HTML from selector shorthand.

Two expansion dialects are exposed:
    - `nest` expands `/`-nested, `+`-separated selector paths around one
      piece of content.
    - `zz` expands templates with `( ... )` child groups and `%` placeholders
      filled from positional arguments.

The remaining helpers (`tag`, `br`, `li`, `p`) render single elements with
the same attribute policy. All helpers share one default renderer; pass
`renderer=` to `nest` or `zz` to use a different `RenderConfig`.
"""

from tagpath.core.types import ArgumentValue, AttributeMap, RenderAttributes
from tagpath.expansion.path import expand
from tagpath.expansion.template import render
from tagpath.rendering.renderer import HtmlRenderer

_default_renderer = HtmlRenderer()


def tag(name: str, content: str = "", attributes: RenderAttributes | None = None) -> str:
    """Render a single element; `content` is inserted without escaping."""
    return _default_renderer.render(name, attributes, content)


def br() -> str:
    return tag("br")


def li(content: str = "", attributes: RenderAttributes | None = None) -> str:
    return tag("li", content, attributes)


def p(content: str = "", attributes: RenderAttributes | None = None) -> str:
    return tag("p", content, attributes)


def nest(
    path: str,
    content: str = "",
    root_overrides: AttributeMap | None = None,
    renderer: HtmlRenderer | None = None,
) -> str:
    """
    Expand a path selector around `content`.

    Params:
        path: Selector chain such as `div#wrapper/a#my.link[href=#]`
        content: Content of the innermost element; a `%` segment splices it
        root_overrides: Attributes merged into the outermost element
        renderer: Optional renderer replacing the default one

    Returns:
        Rendered markup
    """
    return expand(path, content, root_overrides, renderer or _default_renderer)


def zz(template: str, *args: ArgumentValue, renderer: HtmlRenderer | None = None) -> str:
    """
    Render a template, binding each `%` to the next positional argument.

    Params:
        template: Template such as `div.card(a[href=%]%)`
        *args: Values for the placeholders, in template order
        renderer: Optional renderer replacing the default one

    Returns:
        Rendered markup

    Raises:
        ArgumentExhaustedError: If the template has more `%` than arguments
    """
    return render(template, args, renderer or _default_renderer)
