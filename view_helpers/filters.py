"""Jinja2 integration — exposes every helper as a template filter.

Markup-producing filters escape plain values before rendering; ``Markup``
values are treated as already-rendered fragments and pass through.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment
from markupsafe import Markup, escape

from view_helpers.components.dates import time_ago_in_words_or_date
from view_helpers.components.lists import convert_to_list_items, info_pair, is_blank
from view_helpers.components.numbers import commify
from view_helpers.components.tables import generate_table
from view_helpers.components.text import js_string, snakeify, urlify


def _time_ago_or_date(value, short_format: str | None = None, long_format: str | None = None) -> str:
    # Jinja prints None literally, so an absent date renders as empty
    return time_ago_in_words_or_date(value, short_format, long_format) or ""


def _list_items(items, stripe: bool | None = None) -> Markup:
    return Markup(convert_to_list_items([escape(item) for item in items], stripe))


def _table(collection, headers=None, **attrs: Any) -> Markup:
    if collection:
        collection = [[escape(value) for value in values] for values in collection]
    if headers is not None:
        headers = [escape(header) for header in headers]
    return Markup(generate_table(collection, headers, attrs or None) or "")


def _info_pair(value, label: str) -> Markup:
    # Blank values keep their identity so the placeholder still applies
    if not is_blank(value):
        value = escape(value)
    return Markup(info_pair(escape(label), value))


FILTERS = {
    "time_ago_or_date": _time_ago_or_date,
    "commify": commify,
    "snakeify": snakeify,
    "js_string": js_string,
    "urlify": urlify,
    "list_items": _list_items,
    "table": _table,
    "info_pair": _info_pair,
}


def register_filters(env: Environment) -> Environment:
    """Install the helper filters on ``env`` and return it."""
    env.filters.update(FILTERS)
    return env


def create_environment(**kwargs: Any) -> Environment:
    """Build a Jinja2 environment with the helper filters installed.

    Autoescaping is on unless the caller says otherwise.
    """
    kwargs.setdefault("autoescape", True)
    return register_filters(Environment(**kwargs))
