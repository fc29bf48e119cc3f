"""Serialize a mapping back to dotenv text that parses to the same mapping."""

from __future__ import annotations

from collections.abc import Mapping

from envious.grammar import is_valid_name
from envious.lexer import WHITESPACE, is_unquoted_char

_ENCODE = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _is_bare(value: str) -> bool:
    if not value or value[0] in WHITESPACE or value[-1] in WHITESPACE:
        return False
    return all(is_unquoted_char(c) for c in value)


def format_value(value: str) -> str:
    """Format a value for .env: quote if needed."""
    if _is_bare(value):
        return value
    return '"' + "".join(_ENCODE.get(c, c) for c in value) + '"'


def format_line(key: str, value: str, export: bool = False) -> str:
    if not is_valid_name(key):
        raise ValueError(f"Invalid variable name: {key!r}")
    prefix = "export " if export else ""
    return f"{prefix}{key}={format_value(value)}"


def dumps(values: Mapping[str, str], export: bool = False) -> str:
    """Render *values* one ``KEY=value`` line each, sorted by key."""
    lines = [format_line(k, v, export=export) for k, v in sorted(values.items())]
    return "\n".join(lines) + "\n" if lines else ""
