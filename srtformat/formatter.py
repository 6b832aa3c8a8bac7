from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from srtcodecs import Detection, normalize_source
from srtcodecs.detect import Classifier

from .coalescer import coalesce_into
from .cues import Cue, parse_cues
from .emitter import emit_cues
from .logging_helper import log_debug

# Pass-through input may not be valid UTF-8; surrogateescape carries such bytes through unchanged.
_TEXT_ERRORS = "surrogateescape"


@dataclass
class FormatResult:
    output: bytes
    detection: Detection
    parsed: int
    merged: int

    @property
    def emitted(self) -> int:
        return self.parsed - self.merged


def format_text(text: str, *, coalesce: bool = True) -> str:
    """Parse, optionally coalesce, and re-emit already-decoded SRT text."""
    return _format_text(text, coalesce=coalesce)[0]


def _format_text(text: str, *, coalesce: bool) -> Tuple[str, int, int]:
    cues: List[Cue] = []
    counts = {"parsed": 0, "merged": 0}

    def on_cue(cue: Cue) -> None:
        counts["parsed"] += 1
        if coalesce:
            if coalesce_into(cues, cue):
                counts["merged"] += 1
        else:
            cues.append(cue)

    parse_cues(text, on_cue=on_cue)
    return emit_cues(cues), counts["parsed"], counts["merged"]


def format_srt(
    data: bytes,
    *,
    coalesce: bool = True,
    min_confidence: float = 0.0,
    classifier: Optional[Classifier] = None,
) -> FormatResult:
    """Normalize raw subtitle bytes into canonical UTF-8 SRT.

    Raises a SrtFormatError subclass on detection, transcoding or parse
    failure; nothing is returned partially.
    """
    utf8, detection = normalize_source(data, classifier=classifier, min_confidence=min_confidence)
    text = utf8.decode("utf-8", errors=_TEXT_ERRORS)
    rendered, parsed, merged = _format_text(text, coalesce=coalesce)
    log_debug(f"Cues -> parsed={parsed}, merged={merged}, emitted={parsed - merged}")
    return FormatResult(
        output=rendered.encode("utf-8", errors=_TEXT_ERRORS),
        detection=detection,
        parsed=parsed,
        merged=merged,
    )
