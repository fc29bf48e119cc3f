"""Entry and comment rules.

Grammar::

    entry    = [ "export" whitespace+ ] name "=" value [ line_terminator ]
    name     = ( letter | "_" ) ( letter | digit | "_" )*
    comment  = "#" ( any char but a line terminator )*
"""

from __future__ import annotations

from typing import NamedTuple

from envious.lexer import (
    COMMENT_START,
    LINE_TERMINATORS,
    WHITESPACE,
    match_line_terminator,
    match_whitespace,
)
from envious.values import parse_value

EXPORT = "export"
SEPARATOR = "="

_NAME_START = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_")
_NAME_CHARS = _NAME_START | frozenset("0123456789")


class Entry(NamedTuple):
    """One decoded ``KEY=value`` pair."""

    key: str
    value: str


def is_valid_name(name: str) -> bool:
    return bool(name) and name[0] in _NAME_START and all(c in _NAME_CHARS for c in name)


def match_name(text: str, pos: int) -> int | None:
    n = len(text)
    if pos >= n or text[pos] not in _NAME_START:
        return None
    end = pos + 1
    while end < n and text[end] in _NAME_CHARS:
        end += 1
    return end


def match_export(text: str, pos: int) -> int | None:
    """Match ``export`` plus at least one blank."""
    if not text.startswith(EXPORT, pos):
        return None
    end = pos + len(EXPORT)
    if match_whitespace(text, end) is None:
        return None
    while end < len(text) and text[end] in WHITESPACE:
        end += 1
    return end


def parse_entry(text: str, pos: int) -> tuple[Entry, int] | None:
    """Parse one entry at *pos*; ``None`` if any part of it fails."""
    start = match_export(text, pos)
    if start is None:
        start = pos
    key_end = match_name(text, start)
    if key_end is None:
        return None
    if not text.startswith(SEPARATOR, key_end):
        return None
    value = parse_value(text, key_end + len(SEPARATOR))
    if value is None:
        return None
    decoded, end = value
    after = match_line_terminator(text, end)
    return Entry(text[start:key_end], decoded), (end if after is None else after)


def match_comment(text: str, pos: int) -> int | None:
    """Match a comment up to, not including, the line terminator."""
    if not text.startswith(COMMENT_START, pos):
        return None
    end = pos + 1
    n = len(text)
    while end < n and text[end] not in LINE_TERMINATORS:
        end += 1
    return end
