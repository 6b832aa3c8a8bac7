from __future__ import annotations

from typing import List

from .cues import Cue


def format_cue_block(index: int, start: str, end: str, text: str) -> str:
    # an empty cue is index + timing + the blank separator, nothing more
    if not text:
        return f"{index}\n{start} --> {end}\n\n"
    return f"{index}\n{start} --> {end}\n{text}\n\n"


def emit_cues(cues: List[Cue]) -> str:
    """Render cues as canonical SRT, renumbering them 1..N in place.

    Every block, the last one included, ends with a blank separator line.
    """
    parts: List[str] = []
    for index, cue in enumerate(cues, 1):
        cue.index = index
        parts.append(format_cue_block(index, cue.start, cue.end, cue.text))
    return "".join(parts)
