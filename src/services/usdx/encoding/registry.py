"""
Encoding Registry for the song reader

Provides O(1) lookup of an encoding by the name used in #ENCODING tags.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .base import Encoding

logger = logging.getLogger(__name__)


class EncodingRegistry:
    """Registry mapping encoding names to decoders.

    Filled once at construction and only read afterwards, so one
    instance can serve many readers.
    """

    def __init__(self, encodings: Iterable[Encoding] = ()):
        self._encodings: Dict[str, Encoding] = {}
        for encoding in encodings:
            self._register(encoding)

    def _register(self, encoding: Encoding) -> None:
        name = encoding.name
        if name in self._encodings:
            # Configuration mistake, not fatal: the later entry wins
            logger.warning(f"Duplicate encoding '{name}', replacing {self._encodings[name]!r}")
        self._encodings[name] = encoding

    def get(self, name: str) -> Optional[Encoding]:
        """Return the encoding registered under name, or None.

        Args:
            name: Exact, case-sensitive encoding name
        """
        return self._encodings.get(name)

    def names(self) -> List[str]:
        return list(self._encodings)

    def __contains__(self, name: str) -> bool:
        return name in self._encodings

    def __len__(self) -> int:
        return len(self._encodings)
