from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from srtformat.errors import SrtFormatError


class CharsetError(SrtFormatError):
    """Base error for byte-source detection and transcoding."""


class DetectError(CharsetError):
    """The charset classifier produced no best guess."""


class TranscodeError(CharsetError):
    """Decoding from a legacy or UTF-16 encoding hit an illegal byte sequence."""

    def __init__(self, codec: str, position: int, reason: str) -> None:
        self.codec = codec
        self.position = position
        self.reason = reason
        super().__init__(f"decode error: {codec}: {reason} at byte {position}")


@dataclass(frozen=True)
class Detection:
    """Best guess about the encoding of the input bytes.

    `source` says who made the guess: "bom", "classifier", or "empty" for
    input with nothing left to classify.
    """

    label: str
    confidence: float
    language: str = ""
    source: str = "classifier"

    def describe(self) -> str:
        return f"Input charset: {self.label} (confidence {self.confidence:.2f}) language: {self.language or 'n/a'}"


class SourceDecoder(ABC):
    """Unified interface for turning detected input bytes into UTF-8.

    Implementors should:
    - Decode strictly; illegal sequences surface as TranscodeError.
    - Return UTF-8 bytes without a BOM.
    - Never see the BOM; it is stripped before the decoder is chosen.
    """

    def __init__(self, *, detection: Optional[Detection] = None) -> None:
        self._detection = detection

    @property
    def detection(self) -> Optional[Detection]:
        return self._detection

    @abstractmethod
    def name(self) -> str:
        """Decoder family name (e.g., 'GB-18030', 'Big5', 'passthrough')."""

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """Return `data` re-encoded as UTF-8."""


def transcode(data: bytes, codec: str) -> bytes:
    """Strictly decode `data` with `codec` and re-encode as UTF-8."""
    try:
        text = data.decode(codec)
    except UnicodeDecodeError as e:
        raise TranscodeError(codec, e.start, e.reason) from e
    return text.encode("utf-8")
