"""
Concrete encoding implementations

The USDX format knows three fixed code pages plus an auto-detecting variant.
Fixed decoders substitute U+FFFD for undecodable bytes, like the decoders of
the USDX toolchain; pass errors="strict" to get UnicodeDecodeError instead.
"""

import logging

from services.usdx.encoding.detection import is_utf8

logger = logging.getLogger(__name__)


class FixedEncoding:
    """Decoder bound to a single Python codec."""

    def __init__(self, name: str, codec: str, errors: str = "replace"):
        self._name = name
        self.codec = codec
        self.errors = errors

    @property
    def name(self) -> str:
        return self._name

    def decode(self, raw: bytes) -> str:
        return raw.decode(self.codec, self.errors)

    def __repr__(self):
        return f"FixedEncoding(name={self._name!r}, codec={self.codec!r})"


class AutoEncoding:
    """Decodes as UTF-8 when the input looks like UTF-8, otherwise uses the fallback."""

    def __init__(self, utf8: FixedEncoding, fallback: FixedEncoding):
        self.utf8 = utf8
        self.fallback = fallback

    @property
    def name(self) -> str:
        return "Auto"

    def decode(self, raw: bytes) -> str:
        if is_utf8(raw):
            return self.utf8.decode(raw)
        logger.debug(f"Input is not UTF-8, decoding as {self.fallback.name}")
        return self.fallback.decode(raw)

    def __repr__(self):
        return f"AutoEncoding(fallback={self.fallback.name!r})"


UTF8 = FixedEncoding("UTF8", "utf-8")
CP1250 = FixedEncoding("CP1250", "cp1250")
CP1252 = FixedEncoding("CP1252", "cp1252")
AUTO = AutoEncoding(utf8=UTF8, fallback=CP1250)
