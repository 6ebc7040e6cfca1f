"""Builders for raw song file content used across tests."""

from typing import Union

UTF8_BOM = b"\xef\xbb\xbf"


def song_bytes(*lines: Union[str, bytes], encoding: str = "utf-8", bom: bool = False, newline: str = "\n") -> bytes:
    """
    Join lines into raw file content.

    str lines are encoded with encoding, bytes lines are used as they are.
    Every line, including the last one, is terminated with newline.
    """
    raw = b"".join(
        (line if isinstance(line, bytes) else line.encode(encoding)) + newline.encode("ascii") for line in lines
    )
    return (UTF8_BOM + raw) if bom else raw


def basic_song_lines(title: str = "Test Song", artist: str = "Test Artist"):
    """Header and a short body of a typical song."""
    return [
        f"#TITLE:{title}",
        f"#ARTIST:{artist}",
        "#MP3:song.mp3",
        "#BPM:120",
        "#GAP:1000",
        ": 0 4 5 Hel~",
        ": 4 4 6 lo",
        "E",
    ]
