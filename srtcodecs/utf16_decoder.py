from __future__ import annotations

from typing import Optional

from .base import Detection, SourceDecoder, transcode


class UTF16Decoder(SourceDecoder):
    def __init__(self, *, big_endian: bool = False, detection: Optional[Detection] = None) -> None:
        super().__init__(detection=detection)
        self.big_endian = big_endian

    @property
    def codec(self) -> str:
        return "utf-16-be" if self.big_endian else "utf-16-le"

    def name(self) -> str:
        return "UTF-16BE" if self.big_endian else "UTF-16LE"

    def decode(self, data: bytes) -> bytes:
        return transcode(data, self.codec)
