from __future__ import annotations

from .base import SourceDecoder, transcode


class GB18030Decoder(SourceDecoder):
    """Simplified Chinese input. GB18030 is a superset of GB2312 and GBK,
    so every label of that family is decoded with it."""

    codec = "gb18030"

    def name(self) -> str:
        return "GB-18030"

    def decode(self, data: bytes) -> bytes:
        return transcode(data, self.codec)
