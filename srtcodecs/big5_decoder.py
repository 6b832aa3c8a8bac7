from __future__ import annotations

from typing import Optional

from .base import Detection, SourceDecoder, transcode


class Big5Decoder(SourceDecoder):
    """Traditional Chinese input, plain Big5 unless the label asks for HKSCS."""

    def __init__(self, *, codec: str = "big5", detection: Optional[Detection] = None) -> None:
        super().__init__(detection=detection)
        self.codec = codec

    def name(self) -> str:
        return "Big5"

    def decode(self, data: bytes) -> bytes:
        return transcode(data, self.codec)
