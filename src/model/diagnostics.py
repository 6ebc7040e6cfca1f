"""
Diagnostics produced while reading a song file.

Two tiers exist:
- SongReadError: fatal, stops reading the file. Returned in the error slot of
  a ReadResult together with the partially populated song.
- SongWarning: informational, collected while reading continues.
"""

from typing import List, NamedTuple, Optional

from model.song import Song


class SongReadError(Exception):
    """Base exception for fatal read failures."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause: BaseException | None = cause


class ByteOrderMarkError(SongReadError):
    """Raised when the stream cannot be read or rewound while checking for a BOM."""


class TagDecodeError(SongReadError):
    """Raised when a tag line cannot be decoded with the active encoding."""

    def __init__(self, message: str, line_number: int, encoding_name: str, cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.line_number = line_number
        self.encoding_name = encoding_name


class LineReadError(SongReadError):
    """
    Raised when the next line cannot be produced.

    Common causes:
    - I/O error from the underlying stream
    - Line exceeds MAX_LINE_LENGTH
    - Body line cannot be decoded
    """


class SongWarning(Exception):
    """Base class for non-fatal diagnostics."""

    def __init__(self, message: str, tag: str):
        super().__init__(message)
        self.tag = tag


class DuplicateTagWarning(SongWarning):
    """A recognized tag occurred more than once; the last value wins."""

    def __init__(self, tag: str):
        super().__init__(f"duplicate tag '{tag}'", tag)


class TagValueWarning(SongWarning):
    """The value of a recognized tag could not be converted; the field keeps its previous value."""

    def __init__(self, tag: str, value: str, cause: Exception):
        super().__init__(f"error adding tag '{tag}': {cause}", tag)
        self.value = value
        self.cause = cause


class ReadResult(NamedTuple):
    """Outcome of one read: the song, collected warnings and an optional fatal error."""

    song: Song
    warnings: List[SongWarning]
    error: Optional[SongReadError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "ReadResult":
        """Raise the fatal error if there is one, otherwise return self."""
        if self.error is not None:
            raise self.error
        return self
