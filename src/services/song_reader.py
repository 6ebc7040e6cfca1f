import logging
from typing import BinaryIO, List, Optional, Union

from model.diagnostics import ReadResult, SongReadError, SongWarning, TagDecodeError
from model.song import Song
from services.usdx.encoding import AUTO, UTF8, Encoding, EncodingRegistry, create_registry
from services.usdx.parsers import NotesCollector, TagInterpreter, is_tag_line, iter_lines, sniff_bom, split_tag_line
from utils.logging_utils import log_debug, log_warning, song_context

logger = logging.getLogger(__name__)

# Registries are read-only after construction and shared by all default readers
_default_registry = create_registry()


class SongReader:
    """Reads USDX song files into Song records.

    A reader only holds its immutable encoding registry and default
    encoding, so one instance can serve concurrent reads on separate streams.
    """

    def __init__(self, registry: Optional[EncodingRegistry] = None, default_encoding: Union[Encoding, str, None] = None):
        """
        Args:
            registry: Encodings selectable via #ENCODING; defaults to the USDX set
            default_encoding: Encoding (or its registered name) used until a BOM or
                              #ENCODING tag selects another; defaults to Auto
        """
        self.registry = registry if registry is not None else _default_registry

        if default_encoding is None:
            default_encoding = AUTO
        elif isinstance(default_encoding, str):
            encoding = self.registry.get(default_encoding)
            if encoding is None:
                raise ValueError(f"Unknown default encoding: {default_encoding}")
            default_encoding = encoding
        self.default_encoding: Encoding = default_encoding

    def read(self, stream: BinaryIO, dir: str = "", source_file: str = "") -> ReadResult:
        """
        Read one song file.

        The stream must be binary, positioned at its start and seekable (it is
        rewound when no BOM is present). dir and source_file are copied into
        the song unchanged.

        Returns:
            ReadResult(song, warnings, error). On a fatal error the partial song
            and the warnings collected so far are returned with the error.
        """
        song = Song(dir=dir, source_file=source_file, encoding=self.default_encoding)
        warnings: List[SongWarning] = []

        with song_context(dir, source_file):
            try:
                self._read_into(stream, song, warnings)
            except SongReadError as e:
                log_warning(f"Failed to read song file: {e}", logger)
                return ReadResult(song, warnings, e)

        return ReadResult(song, warnings, None)

    def _read_into(self, stream: BinaryIO, song: Song, warnings: List[SongWarning]) -> None:
        if sniff_bom(stream):
            log_debug("Detected BOM, setting encoding to UTF8", logger)
            song.encoding = UTF8

        interpreter = TagInterpreter(song, self.registry, warnings)
        lines = iter_lines(stream)
        line_number = 0
        for line in lines:
            line_number += 1
            if not is_tag_line(line):
                NotesCollector(song).collect(line, lines)
                break
            try:
                tag, value = split_tag_line(line, song.encoding)
            except UnicodeDecodeError as e:
                raise TagDecodeError(
                    f"error decoding line {line_number} with {song.encoding_name}: {e}",
                    line_number,
                    song.encoding_name,
                    e,
                ) from e
            interpreter.interpret(tag, value)
        else:
            # Header ran to the end of the stream; USDX still records one empty body line
            song.notes.append("")


def read_song(stream: BinaryIO, dir: str = "", source_file: str = "") -> ReadResult:
    """Read a song with a default SongReader."""
    return SongReader().read(stream, dir, source_file)

