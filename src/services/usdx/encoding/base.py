"""
Base Protocol for song file encodings

Defines the interface shared by all decoding strategies.
"""

from typing import Protocol


class Encoding(Protocol):
    """Protocol for a named decoding strategy.

    Implementations are immutable and safe to share between concurrent reads.
    """

    @property
    def name(self) -> str:
        """Return the name used by the #ENCODING tag (e.g., 'CP1252')."""
        ...

    def decode(self, raw: bytes) -> str:
        """Decode raw header or body bytes.

        Args:
            raw: Bytes as read from the song file

        Returns:
            Decoded text

        Raises:
            UnicodeDecodeError: If the bytes are not valid for this encoding
        """
        ...
