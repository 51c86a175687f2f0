"""String rewriting helpers: identifiers, JavaScript literals and URLs."""

from __future__ import annotations

import re

from view_helpers.constants import JS_ESCAPE_MAP

_ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z]+)([A-Z][a-z])", re.ASCII)
_WORD_BOUNDARY_RE = re.compile(r"([a-z\d])([A-Z])", re.ASCII)

# CRLF must come before the single-character class so it is not split
_JS_ESCAPE_RE = re.compile(r"(\\|</|\r\n|[\n\r\"'])")


def snakeify(identifier: str) -> str:
    """Turn ``Foo::BarBaz`` into ``foo/bar_baz``.

    Namespace separators become slashes, case transitions and hyphens become
    underscores, and the result is lowercased. Already snake-cased input is
    returned unchanged.
    """
    text = identifier.replace("::", "/")
    text = _ACRONYM_BOUNDARY_RE.sub(r"\1_\2", text)
    text = _WORD_BOUNDARY_RE.sub(r"\1_\2", text)
    return text.replace("-", "_").lower()


def js_string(text: str) -> str:
    """Escape text for a single- or double-quoted JavaScript string literal.

    Also safe inside an inline ``<script>`` block: ``</`` becomes ``<\\/``.
    """
    return _JS_ESCAPE_RE.sub(lambda m: JS_ESCAPE_MAP[m.group(1)], text)


def urlify(addr: str | None) -> str | None:
    """Prefix ``http://`` unless the address is blank or already has a scheme."""
    if not addr or not addr.strip() or addr.startswith("http"):
        return addr
    return f"http://{addr}"
