"""Byte-source normalization for subtitle input.

Exposes the decoder base types and the normalizer entry point.
"""

from .base import (
    CharsetError,
    DetectError,
    Detection,
    SourceDecoder,
    TranscodeError,
)
from .factory import create_source_decoder, normalize_source

__all__ = [
    "CharsetError",
    "DetectError",
    "Detection",
    "SourceDecoder",
    "TranscodeError",
    "create_source_decoder",
    "normalize_source",
]
