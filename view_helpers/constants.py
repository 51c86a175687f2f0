"""Shared constants for the view helpers."""

from __future__ import annotations

# Age (in days) below which dates render as "... ago"
RELATIVE_CUTOVER_DAYS = 7

SECONDS_PER_DAY = 86400

DEFAULT_SHORT_FORMAT = "%b %e"
DEFAULT_LONG_FORMAT = "%b %e, %Y"

# Minute thresholds used by distance_of_time_in_words
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 1440
MINUTES_PER_MONTH = 43200
MINUTES_PER_YEAR = 525600
MINUTES_PER_QUARTER_YEAR = MINUTES_PER_YEAR // 4

JS_ESCAPE_MAP = {
    "\\": "\\\\",
    "</": "<\\/",
    "\r\n": "\\n",
    "\n": "\\n",
    "\r": "\\n",
    '"': '\\"',
    "'": "\\'",
}

# Position classes for list items, in emission order
CLASS_FIRST = "first"
CLASS_LAST = "last"
CLASS_ODD = "odd"
CLASS_EVEN = "even"

BLANK_PLACEHOLDER = "None"
