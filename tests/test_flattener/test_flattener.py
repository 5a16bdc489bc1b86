"""Tests for the rule flattener."""

import logging

import pytest

from flcss.errors import ValueShapeError
from flcss.flattener import flatten
from flcss.model import Declaration, Rule


def _pairs(rules: list[Rule]) -> list[tuple[str, str]]:
    return [(r.selector, r.block) for r in rules]


# ---------------------------------------------------------------------------
# Plain declarations
# ---------------------------------------------------------------------------


class TestPlainDeclarations:
    def test_single_rule(self):
        rules = flatten(".x", {"color": "red", "backgroundColor": "blue", "zIndex": 2})
        assert len(rules) == 1
        rule = rules[0]
        assert rule.selector == ".x"
        assert rule.block == "color: red; background-color: blue; z-index: 2;"
        assert rule.declarations == (
            Declaration("color", "red"),
            Declaration("background-color", "blue"),
            Declaration("z-index", "2"),
        )

    def test_str_renders_rule(self):
        (rule,) = flatten(".x", {"color": "red"})
        assert str(rule) == ".x { color: red; }"

    def test_vendor_prefixed_property(self):
        (rule,) = flatten(".x", {"WebkitUserSelect": "none"})
        assert rule.block == "-webkit-user-select: none;"

    def test_empty_tree_produces_nothing(self):
        assert flatten(".x", {}) == []

    def test_empty_nested_tree_produces_nothing(self):
        assert flatten(".x", {"a": {}}) == []


# ---------------------------------------------------------------------------
# Nested selectors
# ---------------------------------------------------------------------------


class TestNestedSelectors:
    def test_pseudo_class_concatenates_without_space(self):
        rules = flatten(".x", {"&:hover": {"color": "red"}})
        assert _pairs(rules) == [(".x&:hover", "color: red;")]

    def test_leading_space_makes_descendant(self):
        rules = flatten(".x", {" span": {"color": "red"}})
        assert _pairs(rules) == [(".x span", "color: red;")]

    def test_deep_nesting_concatenates_each_level(self):
        rules = flatten(".x", {"a": {"b": {"&:hover": {"color": "red"}}}})
        assert _pairs(rules) == [(".xab&:hover", "color: red;")]

    def test_parent_without_declarations_emits_only_children(self):
        rules = flatten(".x", {":hover": {"color": "red"}})
        assert [r.selector for r in rules] == [".x:hover"]

    def test_breadth_first_order(self):
        tree = {
            ":hover": {" a": {"color": "green"}, "color": "red"},
            "color": "black",
            ":focus": {"color": "blue"},
        }
        assert _pairs(flatten(".x", tree)) == [
            (".x", "color: black;"),
            (".x:hover", "color: red;"),
            (".x:focus", "color: blue;"),
            (".x:hover a", "color: green;"),
        ]

    def test_selector_containing_at_sign_is_not_split(self):
        rules = flatten(".x", {'[href$="@example.com"]': {"color": "red"}})
        assert _pairs(rules) == [('.x[href$="@example.com"]', "color: red;")]


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestMediaQueries:
    def test_media_wraps_root_selector(self):
        tree = {"color": "red", "@media (max-width: 100px)": {"color": "blue"}}
        assert _pairs(flatten(".x", tree)) == [
            (".x", "color: red;"),
            ("@media (max-width: 100px)", ".x { color: blue; }"),
        ]

    def test_media_rule_str(self):
        (rule,) = flatten(".x", {"@media print": {"display": "none"}})
        assert str(rule) == "@media print { .x { display: none; } }"

    def test_selector_inside_media_is_wrapped(self):
        tree = {"@media (max-width: 100px)": {":hover": {"color": "blue"}}}
        assert _pairs(flatten(".x", tree)) == [
            ("@media (max-width: 100px)", ".x:hover { color: blue; }"),
        ]

    def test_nested_selectors_inside_media_compose(self):
        tree = {"@media screen": {" a": {":hover": {"color": "blue"}}}}
        assert _pairs(flatten(".x", tree)) == [
            ("@media screen", ".x a:hover { color: blue; }"),
        ]

    def test_media_inside_selector(self):
        tree = {":hover": {"@media screen": {"color": "blue"}}}
        assert _pairs(flatten(".x", tree)) == [
            ("@media screen", ".x:hover { color: blue; }"),
        ]

    def test_nested_media_emits_nested_blocks(self):
        tree = {"@media screen": {"@media (min-width: 10px)": {"color": "blue"}}}
        (rule,) = flatten(".x", tree)
        assert str(rule) == (
            "@media screen { @media (min-width: 10px) { .x { color: blue; } } }"
        )

    def test_nested_media_keeps_query_list_intact(self):
        tree = {"@media screen, print": {"@media (min-width: 10px)": {"color": "blue"}}}
        assert _pairs(flatten(".x", tree)) == [
            ("@media screen, print", "@media (min-width: 10px) { .x { color: blue; } }"),
        ]

    def test_nested_media_keeps_negation_scoped(self):
        tree = {"@media not print": {"@media (min-width: 10px)": {"color": "blue"}}}
        assert _pairs(flatten(".x", tree)) == [
            ("@media not print", "@media (min-width: 10px) { .x { color: blue; } }"),
        ]

    def test_three_levels_of_media(self):
        tree = {"@media a": {"@media b": {":hover": {"@media c": {"color": "red"}}}}}
        (rule,) = flatten(".x", tree)
        assert str(rule) == (
            "@media a { @media b { @media c { .x:hover { color: red; } } } }"
        )

    def test_bare_media_has_no_trailing_space(self):
        (rule,) = flatten(".x", {"@media": {"color": "blue"}})
        assert rule.selector == "@media"
        assert str(rule) == "@media { .x { color: blue; } }"

    def test_unsupported_at_rule_dropped(self, caplog):
        tree = {"color": "red", "@supports (display: grid)": {"display": "grid"}}
        with caplog.at_level(logging.DEBUG, logger="flcss.flattener"):
            rules = flatten(".x", tree)
        assert _pairs(rules) == [(".x", "color: red;")]
        assert "@supports" in caplog.text


# ---------------------------------------------------------------------------
# Value shapes
# ---------------------------------------------------------------------------


class TestValueShapes:
    def test_list_value_raises(self):
        with pytest.raises(ValueShapeError):
            flatten(".x", {"margin": ["1px", "2px"]})

    def test_bool_value_raises(self):
        with pytest.raises(ValueShapeError):
            flatten(".x", {":hover": {"visible": False}})
