from attrs import field, frozen

# HTML elements that never take content or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

ATTRIBUTE_ORDER = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "src",
    "srcset",
    "form",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)

DEFAULT_TAG = "div"


@frozen
class RenderConfig:
    """Markup rendering policy shared by every expansion call.

    Attributes:
      - void_elements: Tag names rendered without content or closing tag.
      - attribute_order: Attribute names rendered first, in this order; any other
        attribute follows in insertion order.
      - default_tag: Element name used when a segment names no tag.
    """

    void_elements: frozenset[str] = field(default=VOID_ELEMENTS, converter=frozenset)
    attribute_order: tuple[str, ...] = field(default=ATTRIBUTE_ORDER, converter=tuple)
    default_tag: str = DEFAULT_TAG

    def is_void(self, tag_name: str) -> bool:
        return tag_name.lower() in self.void_elements

    def attribute_rank(self, name: str) -> int:
        """Position of `name` in the priority order, or len(order) when unranked."""
        try:
            return self.attribute_order.index(name)
        except ValueError:
            return len(self.attribute_order)
