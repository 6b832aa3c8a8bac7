from __future__ import annotations

from typing import Optional


class SrtFormatError(Exception):
    """Base error for everything the formatter can fail on."""


class SrtIOError(SrtFormatError):
    """Reading or writing the subtitle file failed."""


class ParseError(SrtFormatError):
    """Malformed SRT input. Always fatal; no partial recovery."""

    reason = "parse error"

    def __init__(self, line_number: int, content: str, reason: Optional[str] = None) -> None:
        self.line_number = line_number
        self.content = content
        if reason is not None:
            self.reason = reason
        super().__init__(f"line {line_number}: {self.reason}: {content}")


class ParseIndexError(ParseError):
    """A cue index line was not a non-negative base-10 integer."""

    reason = "expect number"


class ParseTimeError(ParseError):
    """A timestamp line was rejected, or input ended before one arrived."""

    reason = "invalid time format"


class ParseTextError(ParseError):
    """Input ended right after a timestamp line, before any cue text."""

    reason = "missing cue text"
