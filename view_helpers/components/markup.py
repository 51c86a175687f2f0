"""Minimal markup emission — the tag primitive the list and table helpers build on."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

# Signature shared by content_tag and any host-supplied replacement
TagFn = Callable[..., str]


def attr_escape(text: str) -> str:
    """Quote a value for use inside a double-quoted attribute."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def tag_attributes(attrs: Mapping[str, Any] | None) -> str:
    """Render an attribute map as ` key="value"` pairs, in insertion order.

    ``None`` and ``False`` values are dropped, ``True`` renders as
    ``key="key"``.
    """
    if not attrs:
        return ""
    parts = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            value = key
        parts.append(f' {key}="{attr_escape(str(value))}"')
    return "".join(parts)


def content_tag(name: str, body: Any = None, attrs: Mapping[str, Any] | None = None) -> str:
    """Render ``<name attrs>body</name>``.

    Args:
        name: Tag name, e.g. ``"li"``.
        body: ``None``, a pre-rendered string, or an iterable of fragments
            that are concatenated without a separator.
        attrs: Optional attribute map.
    """
    if body is None:
        inner = ""
    elif isinstance(body, str):
        inner = body
    elif isinstance(body, Iterable):
        inner = "".join(str(part) for part in body)
    else:
        inner = str(body)
    return f"<{name}{tag_attributes(attrs)}>{inner}</{name}>"
