"""Character classes and single-token matchers for dotenv text.

Every matcher takes ``(text, pos)`` and returns the position just past the
token, or ``None`` when nothing matches at *pos*.
"""

from __future__ import annotations

BOM = "\ufeff"
WHITESPACE = frozenset(" \t")
LINE_TERMINATORS = frozenset("\n\r")
QUOTES = frozenset("\"'")
ESCAPE = "\\"
COMMENT_START = "#"


def match_whitespace(text: str, pos: int) -> int | None:
    if pos < len(text) and text[pos] in WHITESPACE:
        return pos + 1
    return None


def match_line_terminator(text: str, pos: int) -> int | None:
    """Match LF, CRLF or a bare CR as one terminator."""
    if pos >= len(text):
        return None
    char = text[pos]
    if char == "\n":
        return pos + 1
    if char == "\r":
        if pos + 1 < len(text) and text[pos + 1] == "\n":
            return pos + 2
        return pos + 1
    return None


def match_bom(text: str, pos: int) -> int | None:
    # Only a leading BOM is ignorable.
    if pos == 0 and text.startswith(BOM):
        return 1
    return None


def skip_ignorable(text: str, pos: int) -> int:
    """Consume a maximal run of BOM, whitespace and line terminators."""
    while True:
        nxt = match_bom(text, pos)
        if nxt is None:
            nxt = match_whitespace(text, pos)
        if nxt is None:
            nxt = match_line_terminator(text, pos)
        if nxt is None:
            return pos
        pos = nxt


def is_unquoted_char(char: str) -> bool:
    """Characters allowed in an unquoted value."""
    if char in LINE_TERMINATORS or char in QUOTES or char == COMMENT_START:
        return False
    return char == "\t" or char.isprintable()


def count_terminators(chunk: str) -> tuple[int, int]:
    """Return (terminator count, index just past the last terminator) in *chunk*.

    The index is -1 when *chunk* holds no terminator. CRLF counts once.
    """
    count = chunk.count("\n") + chunk.count("\r") - chunk.count("\r\n")
    if not count:
        return 0, -1
    return count, max(chunk.rfind("\n"), chunk.rfind("\r")) + 1
