import io
import logging
import os
from typing import Optional

import aiofiles

from model.diagnostics import ReadResult
from services.song_reader import SongReader
from utils.files import get_song_dir_and_source
from utils.logging_utils import TimingSpan

logger = logging.getLogger(__name__)


class SongFileService:
    """Service class for reading USDX song files from disk"""

    def __init__(self, reader: Optional[SongReader] = None):
        self.reader = reader or SongReader()

    async def load(self, filepath: str, base_dir: Optional[str] = None) -> ReadResult:
        """
        Load and parse a song file.

        The file content is read asynchronously and parsed from memory.
        dir is the file's directory relative to base_dir (or its full directory
        when no base_dir is given) and source_file its base name.

        Raises:
            ValueError: If filepath is empty
            FileNotFoundError: If the file does not exist
        """
        if not filepath:
            raise ValueError("No filepath provided")

        if not os.path.isfile(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")

        dir, source_file = get_song_dir_and_source(filepath, base_dir)

        with TimingSpan("load_song", logger, path=filepath):
            async with aiofiles.open(filepath, "rb") as file:
                raw = await file.read()
            result = self.reader.read(io.BytesIO(raw), dir, source_file)

        if result.warnings:
            logger.info(f"Read {filepath} with {len(result.warnings)} warning(s)")
        return result

    async def load_or_raise(self, filepath: str, base_dir: Optional[str] = None) -> ReadResult:
        """Like load(), but raises the fatal read error instead of returning it."""
        result = await self.load(filepath, base_dir)
        return result.raise_for_error()
