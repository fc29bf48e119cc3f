"""Document driver: the loop that walks a whole dotenv text.

Each round skips blanks, line breaks and a leading BOM, then tries an entry
and, failing that, a comment. The loop stops when the text is exhausted or
when neither rule matches; in the second case the unconsumed remainder and
its position are reported instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from envious.grammar import Entry, match_comment, parse_entry
from envious.lexer import count_terminators, skip_ignorable


@dataclass
class ParseState:
    """Cursor and accumulator for a single :func:`drive` call."""

    text: str
    offset: int = 0
    line: int = 1
    line_start: int = 0
    entries: list[Entry] = field(default_factory=list)

    @property
    def column(self) -> int:
        return self.offset - self.line_start

    @property
    def remaining(self) -> str:
        return self.text[self.offset :]

    def advance(self, new_offset: int) -> None:
        """Move the cursor to *new_offset*, counting the line breaks passed over."""
        count, last_end = count_terminators(self.text[self.offset : new_offset])
        if count:
            self.line += count
            self.line_start = self.offset + last_end
        self.offset = new_offset


@dataclass(frozen=True)
class DriveResult:
    """Outcome of one :func:`drive` call."""

    entries: tuple[Entry, ...]
    remaining: str
    line: int
    column: int
    offset: int

    @property
    def complete(self) -> bool:
        return not self.remaining


def drive(text: str) -> DriveResult:
    state = ParseState(text)
    end = len(text)
    while True:
        state.advance(skip_ignorable(text, state.offset))
        if state.offset >= end:
            break
        parsed = parse_entry(text, state.offset)
        if parsed is not None:
            entry, after = parsed
            state.entries.append(entry)
            state.advance(after)
            continue
        after_comment = match_comment(text, state.offset)
        if after_comment is not None:
            state.advance(after_comment)
            continue
        break
    return DriveResult(
        entries=tuple(state.entries),
        remaining=state.remaining,
        line=state.line,
        column=state.column,
        offset=state.offset,
    )
