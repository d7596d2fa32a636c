"""
Tests for the public html helpers.

This module exercises `nest`, `zz` and the single-element helpers end to end,
covering:
- Path nesting, siblings, splicing and root overrides
- Template groups, placeholders and the null/empty attribute rule
- Void elements and attribute ordering
"""

from typing import NamedTuple

import pytest

import tagpath
from tagpath import ArgumentExhaustedError, MalformedSelectorError
from tagpath.html import br, li, nest, p, tag, zz


class NestCase(NamedTuple):
    """Test case for path expansion."""

    name: str
    path: str
    content: str
    expected: str


NEST_CASES = [
    NestCase(
        "id_and_link",
        "div#wrapper/a#my.link[href=#][title=my link]",
        "",
        '<div id="wrapper"><a id="my" class="link" href="#" title="my link"></a></div>',
    ),
    NestCase(
        "hyphenated_id",
        "div#my-wrapper/a#my.link[href=#][title=my link]",
        "",
        '<div id="my-wrapper"><a id="my" class="link" href="#" title="my link"></a></div>',
    ),
    NestCase(
        "default_div_with_siblings",
        ".step/.circle+p",
        "10",
        '<div class="step"><div class="circle"></div><p>10</p></div>',
    ),
    NestCase(
        "explicit_div_with_siblings",
        "div.step/div.circle+p",
        "10",
        '<div class="step"><div class="circle"></div><p>10</p></div>',
    ),
    NestCase(
        "splice_after_sibling",
        "div.step/div.circle+p/span.before+%",
        "10",
        '<div class="step"><div class="circle"></div><p><span class="before"></span>10</p></div>',
    ),
    NestCase(
        "multi_word_class_and_dotted_attribute",
        "a.icon icon-burger mobile[href=#][data-toggle-modal=nav.side]/span",
        "",
        '<a class="icon icon-burger mobile" href="#" data-toggle-modal="nav.side"><span></span></a>',
    ),
    NestCase(
        "data_attribute",
        "div/span[data-name=test]",
        "hello!",
        '<div><span data-name="test">hello!</span></div>',
    ),
    NestCase(
        "boolean_attribute",
        "div/span[disabled]",
        "hello!",
        '<div><span disabled="disabled">hello!</span></div>',
    ),
    NestCase(
        "deep_nesting",
        "div/table/tr/td",
        "hello!",
        "<div><table><tr><td>hello!</td></tr></table></div>",
    ),
    NestCase(
        "spaces_inside_id_and_class",
        "div/table#some-id sss.my-class other_class/tr/td",
        "hello!",
        '<div><table id="some-id sss" class="my-class other_class"><tr><td>hello!</td></tr></table></div>',
    ),
    NestCase(
        "repeated_id_and_class",
        "div/table#some-id#sss.my-class.other_class/tr/td",
        "hello!",
        '<div><table id="some-id sss" class="my-class other_class"><tr><td>hello!</td></tr></table></div>',
    ),
    NestCase(
        "decorations_on_every_level",
        "div#first/table#some-id#sss.my-class.other_class[disabled][data-id=8]/tr/td.last",
        "hello!",
        '<div id="first"><table id="some-id sss" class="my-class other_class" disabled="disabled" data-id="8">'
        '<tr><td class="last">hello!</td></tr></table></div>',
    ),
]


class TestNest:
    """Test the path dialect through the public helper."""

    @pytest.mark.parametrize("case", NEST_CASES, ids=lambda c: c.name)
    def test_nest_cases(self, case: NestCase):
        """Test each path against its expected markup."""
        assert nest(case.path, case.content) == case.expected

    def test_root_override_appends_class(self):
        """Test that an override class is appended to the outermost class only."""
        result = nest(".step/.circle+p", 10, {"class": "active"})
        assert result == '<div class="step active"><div class="circle"></div><p>10</p></div>'

    def test_numeric_content(self):
        """Test that non-string content is converted to text."""
        assert nest("p", 10) == "<p>10</p>"

    def test_void_leaf(self):
        """Test that a void element renders without a closing tag."""
        assert nest("br") == "<br>"
        assert nest("div/br") == "<div><br></div>"

    def test_empty_path(self):
        """Test that an empty path yields an empty result."""
        assert nest("") == ""

    def test_malformed_bracket(self):
        """Test that an unterminated bracket is reported."""
        with pytest.raises(MalformedSelectorError):
            nest("div/span[data-name=test")

    def test_separators_inside_brackets(self):
        """Test that `/` and `+` inside attribute values do not split the path."""
        assert nest("a[href=/home]/span", "x") == '<a href="/home"><span>x</span></a>'


class TestZZ:
    """Test the template dialect through the public helper."""

    def test_attribute_placeholder_and_ordering(self):
        """Test a placeholder attribute value and the attribute priority order."""
        result = zz(
            "input.quantity-field[type=number][name=quantity][step=1][readonly][data-sku=%]",
            "SKU",
        )
        assert result == (
            '<input type="number" class="quantity-field" name="quantity" '
            'readonly="readonly" step="1" data-sku="SKU">'
        )

    def test_child_group_with_two_placeholders(self):
        """Test attribute then content placeholders inside a child group."""
        result = zz("div.card card-primary(a[href=%]%)", "http://github.com/", "link")
        assert result == '<div class="card card-primary"><a href="http://github.com/">link</a></div>'

    def test_placeholders_follow_text_order(self):
        """Test that placeholders bind left to right regardless of depth."""
        result = zz(".circle([data-name=%]+.round%+p)+span%", "step", 10, 20)
        assert result == (
            '<div class="circle"><div data-name="step"></div>'
            '<div class="round">10</div><p></p></div><span>20</span>'
        )

    def test_class_placeholder(self):
        """Test a `.%` class placeholder before a child group."""
        expected = (
            '<div class="step"><div class="circle"></div>'
            '<div class="round">10</div><p></p></div><span>20</span>'
        )
        assert zz(".%(.circle+.round%+p)+span%", "step", 10, 20) == expected
        assert zz("div.%(div.circle+div.round%+p)+span%", "step", 10, 20) == expected

    def test_svg_element_keeps_closing_tag(self):
        """Test that non-void elements close even without content."""
        result = zz(
            "circle#gray_circle[r=16][cx=19][cy=19][fill=transparent]"
            "[stroke-dasharray=565.48][stroke-dashoffset=0]"
        )
        assert result == (
            '<circle id="gray_circle" r="16" cx="19" cy="19" fill="transparent" '
            'stroke-dasharray="565.48" stroke-dashoffset="0"></circle>'
        )

    def test_slashes_inside_attribute_values(self):
        """Test that `/` is literal inside template brackets."""
        result = zz("a.logo[href=/](img[src=/img/logo.gif])")
        assert result == '<a class="logo" href="/"><img src="/img/logo.gif"></a>'

    def test_sibling_buttons(self):
        """Test sibling elements with boolean attributes and content placeholders."""
        result = zz(".buttons(button.link[data-close-modal]%+button.btn btn-primary%)", "Cancel", "Save")
        assert result == (
            '<div class="buttons"><button class="link" data-close-modal="data-close-modal">Cancel</button>'
            '<button class="btn btn-primary">Save</button></div>'
        )

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("checked", '<input type="checkbox" checked="checked">'),
            ("", '<input type="checkbox" checked="">'),
            (None, '<input type="checkbox">'),
        ],
    )
    def test_null_omits_attribute(self, value, expected):
        """Test that None removes the attribute while an empty string keeps it."""
        assert zz("input[type=checkbox][checked=%]", value) == expected

    def test_missing_argument_raises(self):
        """Test that a placeholder without an argument fails."""
        with pytest.raises(ArgumentExhaustedError):
            zz(".test%")

    def test_empty_template(self):
        """Test that an empty template yields an empty result."""
        assert zz("") == ""

    def test_custom_renderer(self, section_renderer):
        """Test that a renderer passed by keyword replaces the default one."""
        assert zz(".x%", "y", renderer=section_renderer) == '<section class="x">y</section>'
        assert zz("hr+br", renderer=section_renderer) == "<hr><br></br>"


class TestTagHelpers:
    """Test the single-element helpers."""

    def test_br(self):
        """Test that br renders as a void element."""
        assert br() == "<br>"

    def test_li(self):
        """Test li with a class attribute."""
        assert li("point", {"class": "active"}) == '<li class="active">point</li>'

    def test_p(self):
        """Test p with a class attribute."""
        assert p("test", {"class": "description"}) == '<p class="description">test</p>'

    def test_tag_does_not_escape_content(self):
        """Test that content is inserted as markup."""
        assert tag("div", "<b>x</b>") == "<div><b>x</b></div>"


class TestPackageExports:
    """Test the package level exports."""

    def test_helpers_exported(self):
        """Test that the helpers are reachable from the package root."""
        assert tagpath.nest is nest
        assert tagpath.zz is zz

    def test_version_available(self):
        """Test that the installed version is exposed."""
        assert isinstance(tagpath.__version__, str)
