import io
import os
import sys
import pytest

# Ensure src directory is importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, 'src')
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# Add tests directory to path for test utilities
TESTS_DIR = os.path.join(PROJECT_ROOT, 'tests')
if TESTS_DIR not in sys.path:
    sys.path.append(TESTS_DIR)

from services.song_reader import SongReader
from test_utils.song_factory import song_bytes


@pytest.fixture
def reader():
    """SongReader with the default USDX encodings and Auto as default encoding."""
    return SongReader()


@pytest.fixture
def read_lines(reader):
    """
    Read a song built from the given lines.

    Usage:
        song, warnings, error = read_lines("#TITLE:Foo", "Line1")
    """
    def _read(*lines, encoding="utf-8", bom=False, newline="\n", dir="", source_file=""):
        stream = io.BytesIO(song_bytes(*lines, encoding=encoding, bom=bom, newline=newline))
        return reader.read(stream, dir, source_file)

    return _read


@pytest.fixture
def song_file(tmp_path):
    """
    Write a song file below tmp_path and return its path.

    Usage:
        path = song_file("Artist - Title/song.txt", "#TITLE:Foo", encoding="cp1252")
    """
    def _write(relative_path, *lines, encoding="utf-8", bom=False):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(song_bytes(*lines, encoding=encoding, bom=bom))
        return str(path)

    return _write


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after tests that reconfigure logging."""
    import logging

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    from common.utils.async_logging import shutdown_async_logging

    shutdown_async_logging()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
