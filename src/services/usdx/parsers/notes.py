from typing import Iterable

from model.diagnostics import LineReadError
from model.song import Song


class NotesCollector:
    """Captures the notation body: every line after the header, unmodified and in order.

    Lines are decoded with the encoding active when the header ended.
    """

    def __init__(self, song: Song):
        self.song = song

    def collect(self, first_line: bytes, remaining: Iterable[bytes]) -> None:
        """
        Append first_line (the line that ended the header) and all remaining lines.

        Raises:
            LineReadError: If a line cannot be read or decoded
        """
        self._append(first_line)
        for line in remaining:
            self._append(line)

    def _append(self, line: bytes) -> None:
        try:
            self.song.notes.append(self.song.encoding.decode(line))
        except UnicodeDecodeError as e:
            raise LineReadError(
                f"error decoding notes line {len(self.song.notes) + 1} with {self.song.encoding_name}: {e}", e
            ) from e
