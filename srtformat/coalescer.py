from __future__ import annotations

from typing import Iterable, List

from .cues import Cue
from .logging_helper import log_trace


def should_coalesce(previous: Cue, current: Cue) -> bool:
    """Same text and `previous` ends exactly where `current` starts.

    Both comparisons are byte-exact on canonical timestamps and trimmed text.
    """
    return previous.end == current.start and previous.text == current.text


def coalesce_into(cues: List[Cue], cue: Cue) -> bool:
    """Append `cue` to `cues`, or extend the last entry when they coalesce.

    Returns True when `cue` was merged (and dropped).
    """
    if cues and should_coalesce(cues[-1], cue):
        previous = cues[-1]
        log_trace(f"merge cue from line {cue.line_number} into {previous.start} --> {previous.end}; new end {cue.end}")
        previous.end = cue.end
        return True
    cues.append(cue)
    return False


def coalesce_cues(cues: Iterable[Cue]) -> List[Cue]:
    out: List[Cue] = []
    for cue in cues:
        coalesce_into(out, cue)
    return out
