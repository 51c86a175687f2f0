"""List item rendering with positional CSS classes.

Give ``convert_to_list_items`` a sequence of pre-rendered fragments and get
back ``<li>`` elements tagged ``first`` and ``last``.
Striping labels the first item ``odd`` (rows are counted from 1), then
alternates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from view_helpers.components.markup import TagFn, content_tag
from view_helpers.config import settings
from view_helpers.constants import (
    BLANK_PLACEHOLDER,
    CLASS_EVEN,
    CLASS_FIRST,
    CLASS_LAST,
    CLASS_ODD,
)


def position_classes(items: Sequence[str], index: int, stripe: bool = True) -> list[str]:
    """CSS classes for ``items[index]``, in first/last/stripe order.

    first/last compare by value, so a duplicate of the first or last
    fragment is tagged wherever it appears.
    """
    item = items[index]
    classes = []
    if item == items[0]:
        classes.append(CLASS_FIRST)
    if item == items[-1]:
        classes.append(CLASS_LAST)
    if stripe:
        classes.append(CLASS_EVEN if index % 2 == 1 else CLASS_ODD)
    return classes


def list_item_classes(items: Sequence[str], stripe: bool = True) -> list[tuple[str, str]]:
    """Pair each fragment with its space-joined class string."""
    return [
        (items[i], " ".join(position_classes(items, i, stripe)))
        for i in range(len(items))
    ]


def convert_to_list_items(
    items: Sequence[str],
    stripe: bool | None = None,
    *,
    tag: TagFn = content_tag,
) -> str:
    """Render ``items`` as ``<li>`` elements joined by newlines.

    ``stripe`` defaults to the configured value (on unless overridden).
    """
    if stripe is None:
        stripe = settings.stripe
    items = list(items)
    out = [
        tag("li", item, {"class": css or None})
        for item, css in list_item_classes(items, stripe)
    ]
    return settings.list_separator.join(out)


def is_blank(value: Any) -> bool:
    """True for None, False, whitespace-only strings and empty collections."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if hasattr(value, "__len__"):
        return len(value) == 0
    return False


def info_pair(label: str, value: Any, *, tag: TagFn = content_tag) -> str:
    """Render ``label: value`` as nested spans for styling."""
    if is_blank(value):
        value = tag("span", BLANK_PLACEHOLDER, {"class": "blank"})
    label_html = tag("span", f"{label}:", {"class": "label"})
    return tag("span", f"{label_html} {value}", {"class": "info_pair"})
