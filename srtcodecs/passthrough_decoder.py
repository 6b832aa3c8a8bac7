from __future__ import annotations

from .base import SourceDecoder


class PassthroughDecoder(SourceDecoder):
    """Hands the bytes back untouched.

    Used for UTF-8/ASCII and as the fallback for any label without a
    dedicated decoder. Invalid UTF-8 is not corrected.
    """

    def name(self) -> str:
        return "passthrough"

    def decode(self, data: bytes) -> bytes:
        return data
