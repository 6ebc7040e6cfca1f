"""
Line level scanning of song files.

Lines are handled as bytes: the encoding of a file is only known once the
header has been (partly) read, so decoding happens per tag line.
"""

from typing import BinaryIO, Iterator, Tuple

from common.constants import MAX_LINE_LENGTH, TAG_MARKER, TAG_SEPARATOR
from model.diagnostics import LineReadError
from services.usdx.encoding.base import Encoding

_MARKER = TAG_MARKER.encode("ascii")
_SEPARATOR = TAG_SEPARATOR.encode("ascii")


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """
    Yield the lines of stream without their terminator.

    A line ends at '\\n'; one '\\r' directly before it (or before the end of
    the stream) is dropped as well. A trailing newline does not produce an
    extra empty line.

    Raises:
        LineReadError: On I/O errors or lines that do not fit MAX_LINE_LENGTH
                       bytes including the terminator
    """
    while True:
        try:
            line = stream.readline(MAX_LINE_LENGTH)
        except OSError as e:
            raise LineReadError(f"error reading line: {e}", e) from e
        if not line:
            return
        if line.endswith(b"\n"):
            line = line[:-1]
        elif len(line) >= MAX_LINE_LENGTH:
            raise LineReadError(f"line too long (limit {MAX_LINE_LENGTH - 1} bytes)")
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line


def is_tag_line(line: bytes) -> bool:
    return line.startswith(_MARKER)


def split_tag_line(line: bytes, encoding: Encoding) -> Tuple[str, str]:
    """
    Split a tag line into its decoded name and value.

    All leading markers are removed and the rest is split at the first
    separator. Without a separator the name is empty and the whole
    remainder is the value.

    Args:
        line: Raw tag line, without line terminator
        encoding: Encoding active when the line is processed

    Returns:
        Tuple of (name, value)

    Raises:
        UnicodeDecodeError: If the encoding rejects the bytes
    """
    line = line.lstrip(_MARKER)
    raw_tag, separator, raw_value = line.partition(_SEPARATOR)
    if not separator:
        raw_tag, raw_value = b"", line
    return encoding.decode(raw_tag), encoding.decode(raw_value)
