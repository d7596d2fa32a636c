"""
Markup serialization for resolved elements.

This module turns a `(tag_name, attributes, content)` triple into an HTML
string. It is the only place where escaping happens: attribute values are
escaped, content is treated as already-built markup and inserted verbatim.
"""

from html import escape

from tagpath.config import RenderConfig
from tagpath.core.nodes import Node
from tagpath.core.types import RenderAttributes


class HtmlRenderer:
    """Serializer for single HTML elements.

    Responsibilities:
      - Order attributes by the configured priority list.
      - Escape attribute values, drop empty classes and disabled attributes.
      - Render void elements without content or closing tag.

    Notes:
      - Holds no state besides its immutable `RenderConfig`, so one instance can
        be shared by any number of expansion calls.
    """

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

    def render(
        self,
        tag_name: str,
        attributes: RenderAttributes | None = None,
        content: str = "",
    ) -> str:
        """Render one element.

        Params:
            tag_name: Element name; empty falls back to the configured default tag.
            attributes: Attribute mapping; see `render_attributes` for value rules.
            content: Inner markup, inserted without escaping.

        Returns:
            The element as an HTML string.
        """
        name = tag_name or self.config.default_tag
        html = f"<{name}{self.render_attributes(attributes or {})}>"
        if self.config.is_void(name):
            return html
        return f"{html}{content}</{name}>"

    def render_node(self, node: Node) -> str:
        return self.render(node.tag_name, node.attributes, node.content)

    def render_attributes(self, attributes: RenderAttributes) -> str:
        """Serialize an attribute mapping to the text following the tag name.

        Value rules:
          - None and False skip the attribute; True renders the bare name.
          - A list or tuple `class` value is space-joined.
          - An empty `class` is skipped, any other empty value renders `name=""`.

        Returns:
            Attribute text with a leading space per attribute, or "" when empty.
        """
        parts = []
        for name in self.ordered_names(attributes):
            value = attributes[name]
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
                continue
            if name == "class":
                if isinstance(value, (list, tuple)):
                    value = " ".join(str(v) for v in value if v)
                if value == "":
                    continue
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
        return "".join(parts)

    def ordered_names(self, attributes: RenderAttributes) -> list[str]:
        # sorted() is stable, so unranked names keep their insertion order
        return sorted(attributes, key=self.config.attribute_rank)
