"""Tests for list items and info pairs."""

from __future__ import annotations

from view_helpers.components.lists import (
    convert_to_list_items,
    info_pair,
    is_blank,
    list_item_classes,
    position_classes,
)
from view_helpers.config import settings


class TestListItemClasses:
    def test_four_items_striped(self):
        pairs = list_item_classes(["a", "b", "c", "d"])
        assert pairs == [
            ("a", "first odd"),
            ("b", "even"),
            ("c", "odd"),
            ("d", "last even"),
        ]

    def test_without_stripe(self):
        classes = [css for _, css in list_item_classes(["a", "b", "c"], stripe=False)]
        assert classes == ["first", "", "last"]

    def test_single_item(self):
        assert list_item_classes(["only"]) == [("only", "first last odd")]

    def test_empty(self):
        assert list_item_classes([]) == []

    def test_duplicates_compare_by_value(self):
        classes = [css for _, css in list_item_classes(["a", "b", "a", "c"])]
        assert classes == ["first odd", "even", "first odd", "last even"]

    def test_repeat_of_last_value_is_tagged_last(self):
        classes = [css for _, css in list_item_classes(["a", "c", "b", "c"])]
        assert classes == ["first odd", "last even", "odd", "last even"]

    def test_position_classes_order(self):
        assert position_classes(["x", "y"], 1) == ["last", "even"]


class TestConvertToListItems:
    def test_renders_li_elements(self):
        html = convert_to_list_items(["a", "b"])
        assert html == '<li class="first odd">a</li>\n<li class="last even">b</li>'

    def test_middle_item_without_classes(self):
        html = convert_to_list_items(["a", "b", "c"], stripe=False)
        assert html.split("\n")[1] == "<li>b</li>"

    def test_empty(self):
        assert convert_to_list_items([]) == ""

    def test_stripe_default_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "stripe", False)
        assert convert_to_list_items(["a", "b"]) == '<li class="first">a</li>\n<li class="last">b</li>'

    def test_separator_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "list_separator", "")
        assert convert_to_list_items(["a", "b"]).count("\n") == 0

    def test_custom_tag_primitive(self):
        calls = []

        def tag(name, body=None, attrs=None):
            calls.append((name, body, attrs))
            return f"[{body}]"

        assert convert_to_list_items(["a", "b"], tag=tag) == "[a]\n[b]"
        assert calls[0] == ("li", "a", {"class": "first odd"})

    def test_accepts_generators(self):
        html = convert_to_list_items(str(i) for i in range(3))
        assert html.count("<li") == 3


class TestInfoPair:
    def test_with_value(self):
        assert info_pair("Name", "Bob") == (
            '<span class="info_pair"><span class="label">Name:</span> Bob</span>'
        )

    def test_blank_value(self):
        html = info_pair("Email", "  ")
        assert '<span class="blank">None</span>' in html
        assert '<span class="label">Email:</span>' in html

    def test_zero_is_not_blank(self):
        assert info_pair("Count", 0).endswith(" 0</span>")


class TestIsBlank:
    def test_blank_values(self):
        for value in (None, False, "", "   ", [], {}, ()):
            assert is_blank(value)

    def test_present_values(self):
        for value in (0, True, "x", [0], {"a": 1}):
            assert not is_blank(value)
