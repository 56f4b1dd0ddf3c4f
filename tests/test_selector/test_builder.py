"""Tests for the selector builder facade and simple selectors."""

import pytest

from cssbuilder import css_selector_builder
from cssbuilder.errors import DuplicateKindError, OrderError
from cssbuilder.model.fragment import Fragment, FragmentKind
from cssbuilder.selector import SelectorBuilder, SimpleSelector


@pytest.fixture
def builder() -> SelectorBuilder:
    return css_selector_builder


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_id_and_classes(self, builder):
        result = builder.id("main").class_("container").class_("editable").stringify()
        assert result == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert result == 'a[href$=".png"]:focus'

    def test_every_kind_in_order(self, builder):
        sel = (
            builder.element("input")
            .id("name")
            .class_("field")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_element("placeholder")
        )
        assert sel.stringify() == "input#name.field[required]:focus::placeholder"

    def test_str_matches_stringify(self, builder):
        sel = builder.element("p").class_("lead")
        assert str(sel) == sel.stringify() == "p.lead"

    def test_empty_selector(self):
        assert SimpleSelector().stringify() == ""

    def test_facade_stringify_is_empty(self, builder):
        assert builder.stringify() == ""

    def test_each_facade_method_starts_fresh(self, builder):
        assert builder.element("div").stringify() == "div"
        assert builder.id("x").stringify() == "#x"
        assert builder.class_("c").stringify() == ".c"
        assert builder.attr("disabled").stringify() == "[disabled]"
        assert builder.pseudo_class("hover").stringify() == ":hover"
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_empty_values_pass_through(self, builder):
        assert builder.element("").class_("").attr("").stringify() == ".[]"


# ---------------------------------------------------------------------------
# Repeatable kinds
# ---------------------------------------------------------------------------


class TestRepeatable:
    def test_many_classes(self, builder):
        sel = builder.element("div")
        for name in ("a", "b", "c", "d"):
            sel = sel.class_(name)
        assert sel.stringify() == "div.a.b.c.d"

    def test_many_attributes(self, builder):
        sel = builder.attr("href").attr("title").attr('rel="nofollow"')
        assert sel.stringify() == '[href][title][rel="nofollow"]'

    def test_many_pseudo_classes(self, builder):
        sel = builder.element("a").pseudo_class("hover").pseudo_class("focus")
        assert sel.stringify() == "a:hover:focus"

    def test_fragments_in_append_order(self, builder):
        sel = builder.element("li").class_("x").class_("y")
        assert sel.fragments == (
            Fragment(FragmentKind.ELEMENT, "li"),
            Fragment(FragmentKind.CLASS, "x"),
            Fragment(FragmentKind.CLASS, "y"),
        )
        assert len(sel) == 3
        assert sel.last_kind is FragmentKind.CLASS


# ---------------------------------------------------------------------------
# Cardinality
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_second_element(self, builder):
        with pytest.raises(DuplicateKindError):
            builder.element("div").element("span")

    def test_second_id(self, builder):
        with pytest.raises(DuplicateKindError):
            builder.id("a").id("b")

    def test_second_pseudo_element(self, builder):
        with pytest.raises(DuplicateKindError):
            builder.pseudo_element("before").pseudo_element("after")

    def test_message_mentions_single_occurrence(self, builder):
        with pytest.raises(DuplicateKindError, match="more than one time"):
            builder.element("a").element("b")


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrder:
    def test_element_after_id(self, builder):
        with pytest.raises(OrderError):
            builder.id("main").element("div")

    def test_id_after_class(self, builder):
        with pytest.raises(OrderError):
            builder.class_("c").id("main")

    def test_class_after_attr(self, builder):
        with pytest.raises(OrderError):
            builder.attr("href").class_("c")

    def test_attr_after_pseudo_class(self, builder):
        with pytest.raises(OrderError):
            builder.pseudo_class("hover").attr("href")

    def test_pseudo_class_after_pseudo_element(self, builder):
        with pytest.raises(OrderError):
            builder.pseudo_element("after").pseudo_class("hover")

    def test_message_lists_order(self, builder):
        with pytest.raises(OrderError, match="element, id, class, attribute, pseudo-class, pseudo-element"):
            builder.id("x").element("y")

    def test_skipping_kinds_is_allowed(self, builder):
        assert builder.element("a").pseudo_element("after").stringify() == "a::after"


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_append_leaves_receiver_unchanged(self, builder):
        base = builder.element("div")
        base.class_("a")
        assert base.stringify() == "div"

    def test_branches_are_independent(self, builder):
        base = builder.element("div")
        left = base.class_("left")
        right = base.id("right")
        assert left.stringify() == "div.left"
        assert right.stringify() == "div#right"
        assert base.stringify() == "div"

    def test_facade_calls_are_independent(self, builder):
        first = builder.element("div")
        second = builder.element("div")
        assert first == second
        assert first is not second
        assert builder.element("span").stringify() == "span"

    def test_failed_append_leaves_receiver_usable(self, builder):
        sel = builder.element("div").id("main")
        with pytest.raises(OrderError):
            sel.element("span")
        assert sel.class_("ok").stringify() == "div#main.ok"

    def test_selector_is_frozen(self, builder):
        sel = builder.element("div")
        with pytest.raises(AttributeError):
            sel.fragments = ()  # type: ignore[misc]
