"""Public parse functions.

:func:`parse` never raises on bad input; it returns a :class:`ParseSuccess`
or a :class:`ParseFailure`. :func:`parse_strict` returns the mapping
directly and raises :class:`EnvParseError` instead.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from envious.grammar import Entry
from envious.parser import DriveResult, drive

PREVIEW_LENGTH = 20
ELLIPSIS = "..."


class EnvParseError(ValueError):
    """Raised when dotenv text cannot be parsed to the end."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        path: str | Path | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)

    def with_path(self, path: str | Path) -> EnvParseError:
        return EnvParseError(self.message, self.line, self.column, path=path)


@dataclass(frozen=True)
class ParseSuccess:
    values: dict[str, str] = field(default_factory=dict)

    ok = True


@dataclass(frozen=True)
class ParseFailure:
    message: str
    line: int
    column: int
    offset: int
    remaining: str

    ok = False

    def to_error(self) -> EnvParseError:
        return EnvParseError(self.message, self.line, self.column)


ParseResult = Union[ParseSuccess, ParseFailure]


def _preview(remaining: str) -> str:
    preview = remaining[:PREVIEW_LENGTH].strip()
    if len(remaining) > PREVIEW_LENGTH:
        preview += ELLIPSIS
    return json.dumps(preview, ensure_ascii=False)


def _failure(result: DriveResult) -> ParseFailure:
    message = (
        f"Parse error at line {result.line}, column {result.column}: "
        f"could not parse remaining input starting with: {_preview(result.remaining)}"
    )
    return ParseFailure(
        message=message,
        line=result.line,
        column=result.column,
        offset=result.offset,
        remaining=result.remaining,
    )


def parse(text: str) -> ParseResult:
    """Parse dotenv *text*.

    Returns :class:`ParseSuccess` with a ``dict`` of values when the whole
    text was consumed (a repeated key keeps its last value), otherwise a
    :class:`ParseFailure` whose message names the line, the column and the
    first unparsed characters.

    Examples
    --------
    >>> parse("PORT=3000").values
    {'PORT': '3000'}
    >>> parse("INVALID").message
    'Parse error at line 1, column 0: could not parse remaining input starting with: "INVALID"'
    """
    result = drive(text)
    if not result.complete:
        return _failure(result)
    return ParseSuccess(values=dict(result.entries))


def parse_strict(text: str) -> dict[str, str]:
    """Like :func:`parse` but return the mapping, raising :class:`EnvParseError` on failure."""
    outcome = parse(text)
    if isinstance(outcome, ParseFailure):
        raise outcome.to_error()
    return outcome.values


def parse_entries(text: str) -> list[Entry]:
    """Return every entry in file order, duplicates included."""
    result = drive(text)
    if not result.complete:
        raise _failure(result).to_error()
    return list(result.entries)
