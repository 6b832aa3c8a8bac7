from __future__ import annotations

import codecs
from typing import Callable, Optional, Tuple

import chardet

from srtformat.logging_helper import log_debug

from .base import Detection, DetectError

Classifier = Callable[[bytes], Detection]

BOMS: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "UTF-8"),
    (codecs.BOM_UTF16_LE, "UTF-16LE"),
    (codecs.BOM_UTF16_BE, "UTF-16BE"),
)


def strip_bom(data: bytes) -> Tuple[Optional[str], bytes]:
    """Return (encoding named by the BOM or None, bytes without the BOM)."""
    for bom, label in BOMS:
        if data.startswith(bom):
            return label, data[len(bom):]
    return None, data


def classify(data: bytes) -> Detection:
    """Best guess from the statistical classifier (chardet)."""
    result = chardet.detect(data)
    label = result.get("encoding")
    if not label:
        raise DetectError("detect charset failed: classifier produced no guess")
    return Detection(
        label=label,
        confidence=float(result.get("confidence") or 0.0),
        language=result.get("language") or "",
    )


def detect_source(data: bytes, classifier: Optional[Classifier] = None) -> Tuple[Detection, bytes]:
    """Identify the encoding of `data` and strip its BOM.

    A BOM decides on its own. Without one, the remaining bytes go to the
    classifier, unless nothing is left.
    """
    bom_label, rest = strip_bom(data)
    if bom_label is not None:
        log_debug(f"BOM found: {bom_label}; stripped {len(data) - len(rest)} byte(s)")
        return Detection(label=bom_label, confidence=1.0, source="bom"), rest
    if not rest:
        return Detection(label="ascii", confidence=1.0, source="empty"), rest
    return (classifier or classify)(rest), rest
