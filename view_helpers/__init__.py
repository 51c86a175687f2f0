"""View helpers — presentation formatting for templates.

Pure functions that render dates, numbers, identifiers, lists and tables
as display text or markup fragments.
"""

from view_helpers.components.dates import (
    distance_of_time_in_words,
    time_ago_in_words,
    time_ago_in_words_or_date,
)
from view_helpers.components.lists import (
    convert_to_list_items,
    info_pair,
    is_blank,
    list_item_classes,
)
from view_helpers.components.markup import content_tag
from view_helpers.components.numbers import commify
from view_helpers.components.tables import TableSections, generate_table, table_sections
from view_helpers.components.text import js_string, snakeify, urlify

__version__ = "0.1.0"

__all__ = [
    "TableSections",
    "commify",
    "content_tag",
    "convert_to_list_items",
    "distance_of_time_in_words",
    "generate_table",
    "info_pair",
    "is_blank",
    "js_string",
    "list_item_classes",
    "snakeify",
    "table_sections",
    "time_ago_in_words",
    "time_ago_in_words_or_date",
    "urlify",
]
