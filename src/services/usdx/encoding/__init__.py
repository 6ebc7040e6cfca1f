"""
USDX Encoding Module

Named decoding strategies selectable through the #ENCODING tag, plus the
UTF-8 heuristic behind the 'Auto' encoding.
"""

from services.usdx.encoding.base import Encoding
from services.usdx.encoding.registry import EncodingRegistry
from services.usdx.encoding.detection import is_utf8
from services.usdx.encoding.decoders import (
    FixedEncoding,
    AutoEncoding,
    UTF8,
    CP1250,
    CP1252,
    AUTO
)


def create_registry() -> EncodingRegistry:
    """
    Create an EncodingRegistry with all encodings known to USDX.

    Returns:
        EncodingRegistry: Registry with Auto, UTF8, CP1250 and CP1252
    """
    return EncodingRegistry([AUTO, UTF8, CP1250, CP1252])


__all__ = [
    'Encoding',
    'EncodingRegistry',
    'create_registry',
    'is_utf8',
    'FixedEncoding',
    'AutoEncoding',
    'UTF8',
    'CP1250',
    'CP1252',
    'AUTO'
]
