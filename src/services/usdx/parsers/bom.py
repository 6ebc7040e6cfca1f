from typing import BinaryIO

from common.constants import UTF8_BOM
from model.diagnostics import ByteOrderMarkError


def sniff_bom(stream: BinaryIO) -> bool:
    """
    Consume a UTF-8 byte order mark at the start of stream.

    Reads three bytes. If they are not a BOM the stream is rewound to its start.

    Returns:
        True if a BOM was found and consumed

    Raises:
        ByteOrderMarkError: If the stream holds fewer than three bytes, or
                            reading or rewinding it fails
    """
    try:
        head = stream.read(len(UTF8_BOM))
        if len(head) < len(UTF8_BOM):
            raise ByteOrderMarkError("error detecting byte order mark: unexpected EOF")
        if head == UTF8_BOM:
            return True
        stream.seek(0)
    except OSError as e:
        raise ByteOrderMarkError(f"error detecting byte order mark: {e}", e) from e
    return False
