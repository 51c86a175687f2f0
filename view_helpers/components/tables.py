"""HTML table rendering from a collection of rows."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from view_helpers.components.markup import TagFn, content_tag


@dataclass
class TableSections:
    """Header row (if any) and body rows, in input order."""

    headers: list[str] | None
    rows: list[list[Any]]


def table_sections(
    collection: Sequence[Sequence[Any]] | None,
    headers: Sequence[str] | None = None,
) -> TableSections | None:
    """Lay out a collection as header and body rows; ``None`` when empty.

    Rows need not be the same length; each keeps exactly its own values.
    """
    if not collection:
        return None
    return TableSections(
        headers=list(headers) if headers is not None else None,
        rows=[list(values) for values in collection],
    )


def generate_table(
    collection: Sequence[Sequence[Any]] | None,
    headers: Sequence[str] | None = None,
    attrs: Mapping[str, Any] | None = None,
    *,
    tag: TagFn = content_tag,
) -> str | None:
    """Build an HTML table.

    Args:
        collection: A sequence of rows, each a sequence of cell values.
        headers: Optional labels for the ``<thead>`` row.
        attrs: Attributes passed along to the ``<table>`` tag.
    """
    sections = table_sections(collection, headers)
    if sections is None:
        return None

    parts = []
    if sections.headers is not None:
        header_row = tag("tr", [tag("th", header) for header in sections.headers])
        parts.append(tag("thead", header_row))
    body_rows = [
        tag("tr", [tag("td", str(value)) for value in values])
        for values in sections.rows
    ]
    parts.append(tag("tbody", body_rows))
    return tag("table", "\n".join(parts), attrs)
