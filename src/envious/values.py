"""Value recognizers and the escape decoder.

A value is one of three forms, tried in this order:

  - double-quoted ``"..."``
  - single-quoted ``'...'``
  - unquoted, running up to a line terminator, ``#`` or quote

An opening quote commits to its form: when the closing quote never shows
up the value fails, and the unquoted form is not tried instead.

Quoted forms may span lines and carry escape sequences, decoded once the
span is closed by :func:`decode_escapes`.
"""

from __future__ import annotations

from envious.lexer import ESCAPE, QUOTES, WHITESPACE, is_unquoted_char

ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "'": "'",
}

# (decoded value, position after the value)
ValueMatch = tuple[str, int]


def decode_escapes(raw: str) -> str:
    """Decode backslash escapes in a quote-stripped span.

    One pass, left to right. ``\\\\`` is resolved before anything else so
    ``\\\\n`` yields a backslash followed by ``n``. Unknown escapes are kept
    verbatim, backslash included.

    >>> decode_escapes(r"a\\nb")
    'a\\nb'
    >>> decode_escapes(r"C:\\\\new")
    'C:\\\\new'
    """
    if ESCAPE not in raw:
        return raw
    out: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        char = raw[i]
        if char == ESCAPE and i + 1 < n and raw[i + 1] in ESCAPES:
            out.append(ESCAPES[raw[i + 1]])
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def capture_quoted(text: str, pos: int, quote: str) -> tuple[str, int] | None:
    """Capture the raw span of a *quote*-delimited value opening at *pos*.

    Returns the span between the quotes (escapes still encoded) and the
    position after the closing quote, or ``None`` if *pos* does not open a
    quote or the quote is never closed.
    """
    n = len(text)
    if pos >= n or text[pos] != quote:
        return None
    i = pos + 1
    while i < n:
        char = text[i]
        if char == ESCAPE and i + 1 < n and text[i + 1] in ESCAPES:
            i += 2
            continue
        if char == quote:
            return text[pos + 1 : i], i + 1
        i += 1
    return None


def parse_double_quoted(text: str, pos: int) -> ValueMatch | None:
    captured = capture_quoted(text, pos, '"')
    if captured is None:
        return None
    raw, end = captured
    return decode_escapes(raw), end


def parse_single_quoted(text: str, pos: int) -> ValueMatch | None:
    captured = capture_quoted(text, pos, "'")
    if captured is None:
        return None
    raw, end = captured
    return decode_escapes(raw), end


def parse_unquoted(text: str, pos: int) -> ValueMatch:
    """Capture an unquoted run starting at *pos*; always matches, possibly empty.

    The run never includes ``#``, so an inline comment is left in place and
    only the surrounding blanks need trimming.
    """
    end = pos
    n = len(text)
    while end < n and is_unquoted_char(text[end]):
        end += 1
    return text[pos:end].strip("".join(WHITESPACE)), end


def parse_value(text: str, pos: int) -> ValueMatch | None:
    """Parse any value form at *pos*; ``None`` only for an unclosed quote."""
    if pos < len(text) and text[pos] in QUOTES:
        if text[pos] == '"':
            return parse_double_quoted(text, pos)
        return parse_single_quoted(text, pos)
    return parse_unquoted(text, pos)
