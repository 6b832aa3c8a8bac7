from __future__ import annotations

import codecs
from typing import Dict, Optional, Tuple

from srtformat.logging_helper import log_debug, log_info, log_trace_block, log_warn

from .base import Detection, SourceDecoder
from .detect import Classifier, detect_source

GB18030 = "GB-18030"
BIG5 = "Big5"
UTF16LE = "UTF-16LE"
UTF16BE = "UTF-16BE"
PASSTHROUGH = "passthrough"

# Keys are Python codec names as returned by codecs.lookup().name.
CODEC_FAMILIES: Dict[str, str] = {
    "gb2312": GB18030,
    "gbk": GB18030,
    "gb18030": GB18030,
    "big5": BIG5,
    "big5hkscs": BIG5,
    "cp950": BIG5,
    "utf-16": UTF16LE,
    "utf-16-le": UTF16LE,
    "utf-16-be": UTF16BE,
}

# Labels other detectors emit that Python's codec registry does not know.
_LABEL_ALIASES: Dict[str, str] = {
    "gb-18030": "gb18030",
}


def _codec_name(label: str) -> Optional[str]:
    key = label.strip().lower()
    key = _LABEL_ALIASES.get(key, key)
    try:
        return codecs.lookup(key).name
    except LookupError:
        return None


def decoder_family(label: str) -> Tuple[str, Optional[str]]:
    """Resolve a detected label to (decoder family, python codec name)."""
    codec = _codec_name(label)
    if codec is None:
        log_warn(f"Unknown charset label '{label}'; passing bytes through")
        return PASSTHROUGH, None
    return CODEC_FAMILIES.get(codec, PASSTHROUGH), codec


def create_source_decoder(detection: Detection, *, min_confidence: float = 0.0) -> SourceDecoder:
    """Factory returning the decoder for a detection.

    - Classifier guesses below `min_confidence` fall back to pass-through.
    - Anything without a dedicated decoder passes through unchanged.
    """
    family, codec = decoder_family(detection.label)
    if detection.source == "classifier" and detection.confidence < min_confidence and family != PASSTHROUGH:
        log_warn(
            f"Charset guess {detection.label} below min_confidence "
            f"({detection.confidence:.2f} < {min_confidence:.2f}); passing bytes through"
        )
        family = PASSTHROUGH

    if family == GB18030:
        from .gb18030_decoder import GB18030Decoder
        decoder: SourceDecoder = GB18030Decoder(detection=detection)
    elif family == BIG5:
        from .big5_decoder import Big5Decoder
        decoder = Big5Decoder(codec="big5hkscs" if codec == "big5hkscs" else "big5", detection=detection)
    elif family in (UTF16LE, UTF16BE):
        from .utf16_decoder import UTF16Decoder
        decoder = UTF16Decoder(big_endian=(family == UTF16BE), detection=detection)
    else:
        from .passthrough_decoder import PassthroughDecoder
        decoder = PassthroughDecoder(detection=detection)
    return decoder


def normalize_source(
    data: bytes,
    *,
    classifier: Optional[Classifier] = None,
    min_confidence: float = 0.0,
) -> Tuple[bytes, Detection]:
    """Strip the BOM, detect the encoding and return UTF-8 bytes plus the detection."""
    detection, rest = detect_source(data, classifier)
    log_info(detection.describe())
    decoder = create_source_decoder(detection, min_confidence=min_confidence)
    log_debug(f"Using source decoder: {decoder.name()} (detected by {detection.source})")
    out = decoder.decode(rest)
    log_trace_block("Decoded input head", out[:512].decode("utf-8", errors="replace"))
    return out, detection
