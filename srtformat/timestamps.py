from __future__ import annotations

import re
from typing import NamedTuple, Optional, Tuple

# Accepts the loose form "0: 1: 2,342 -->  0: 1: 5,334"; "-->" needs whitespace on both sides.
TIME_LINE_RE = re.compile(
    r"^(\d+):\s*(\d+):\s*(\d+),\s*(\d+)\s+-->\s+\s*(\d+):\s*(\d+):\s*(\d+),\s*(\d+)$",
    re.ASCII,
)

CANONICAL_TIME_LINE_RE = re.compile(
    r"^\d{2}:\d{2}:\d{2},\d{3} --> \d{2}:\d{2}:\d{2},\d{3}$",
    re.ASCII,
)

_FIELD_WIDTHS = (2, 2, 2, 3)
# below the smallest limit sys.set_int_max_str_digits() accepts
_INT_SAFE_DIGITS = 600


class Timestamp(NamedTuple):
    """One SRT time point, kept as the digit strings found in the source."""

    hours: str
    minutes: str
    seconds: str
    millis: str

    def canonical(self) -> str:
        """Promote every field to canonical width: HH:MM:SS,mmm.

        Padding only; fields already wider than canonical are left alone.
        """
        h, m, s, ms = (field.zfill(width) for field, width in zip(self, _FIELD_WIDTHS))
        return f"{h}:{m}:{s},{ms}"

    def to_millis(self) -> int:
        return ((int(self.hours) * 60 + int(self.minutes)) * 60 + int(self.seconds)) * 1000 + int(self.millis)

    def magnitude_key(self) -> Tuple[Tuple[int, str], ...]:
        """Per-field (digit count, digits) with leading zeros dropped; orders like the numbers."""
        return tuple((len(digits), digits) for digits in (field.lstrip("0") or "0" for field in self))

    def __str__(self) -> str:
        return self.canonical()


def parse_time_line(line: str) -> Optional[Tuple[Timestamp, Timestamp]]:
    """Match a trimmed timestamp line; return (start, end) or None when rejected."""
    m = TIME_LINE_RE.match(line)
    if not m:
        return None
    groups = m.groups()
    return Timestamp(*groups[:4]), Timestamp(*groups[4:])


def precedes(a: Timestamp, b: Timestamp) -> bool:
    """True when `a` is strictly earlier than `b`.

    Fields too wide for int() are compared by digit magnitude, field by field.
    """
    if max(len(field) for field in a + b) <= _INT_SAFE_DIGITS:
        return a.to_millis() < b.to_millis()
    return a.magnitude_key() < b.magnitude_key()
