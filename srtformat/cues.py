from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from .errors import ParseIndexError, ParseTextError, ParseTimeError
from .logging_helper import log_trace, log_warn
from .timestamps import Timestamp, parse_time_line, precedes

INDEX_LINE_RE = re.compile(r"^\d+$", re.ASCII)


@dataclass
class Cue:
    """One subtitle entry.

    `start`/`end` are canonical "HH:MM:SS,mmm" strings. `text` holds trimmed
    lines joined by a single newline. `index` is assigned on emission; the
    value found in the source file is validated and then dropped.
    """

    start: str
    end: str
    text: str = ""
    index: int = 0
    line_number: int = field(default=0, compare=False, repr=False)

    def append_line(self, line: str) -> None:
        self.text = line if not self.text else f"{self.text}\n{line}"


class ParserState(enum.Enum):
    EXPECT_INDEX = "expect_index"
    EXPECT_TIME = "expect_time"
    EXPECT_TEXT = "expect_text"


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (1-based line number, trimmed line) pairs.

    Lines are split on "\\n" only; a trailing "\\r" goes away with the trim.
    A final newline does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, raw in enumerate(lines, 1):
        yield number, raw.strip()


def _check_order(cue: Cue, start: Timestamp, end: Timestamp) -> None:
    if precedes(end, start):
        log_warn(f"line {cue.line_number}: cue ends before it starts: {cue.start} --> {cue.end}")


def parse_cues(
    text: str,
    on_cue: Optional[Callable[[Cue], None]] = None,
) -> List[Cue]:
    """Run the three-state machine over `text` and return cues in source order.

    When `on_cue` is given, every finalized cue is handed to it instead of
    being collected, and the returned list is empty.
    """
    cues: List[Cue] = []
    sink = on_cue if on_cue is not None else cues.append

    state = ParserState.EXPECT_INDEX
    current: Optional[Cue] = None
    pending_index_line = 0
    pending_index = ""

    for number, line in iter_lines(text):
        if state is ParserState.EXPECT_INDEX:
            if not line:
                continue
            if not INDEX_LINE_RE.match(line):
                raise ParseIndexError(number, line)
            pending_index_line = number
            pending_index = line
            state = ParserState.EXPECT_TIME
        elif state is ParserState.EXPECT_TIME:
            times = parse_time_line(line)
            if times is None:
                raise ParseTimeError(number, line)
            start, end = times
            current = Cue(start=start.canonical(), end=end.canonical(), line_number=number)
            _check_order(current, start, end)
            state = ParserState.EXPECT_TEXT
        elif state is ParserState.EXPECT_TEXT and current is not None:
            if line:
                current.append_line(line)
                continue
            log_trace(f"line {number}: cue from line {current.line_number} finalized")
            sink(current)
            current = None
            state = ParserState.EXPECT_INDEX
        else:  # pragma: no cover
            raise RuntimeError(f"parser reached {state!r} without a cue in progress")

    if state is ParserState.EXPECT_TIME:
        raise ParseTimeError(
            pending_index_line,
            pending_index,
            reason="unexpected end of input, timestamp line expected after index",
        )
    if state is ParserState.EXPECT_TEXT and current is not None:
        if not current.text:
            raise ParseTextError(
                current.line_number,
                "",
                reason="unexpected end of input after timestamp line",
            )
        sink(current)

    return cues
