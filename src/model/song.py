from typing import TYPE_CHECKING, Any, Dict, List, Optional

from common.constants import DEFAULT_RESOLUTION

if TYPE_CHECKING:
    from services.usdx.encoding.base import Encoding


class CustomTag:
    """Header tag the format does not define, kept verbatim"""

    def __init__(self, tag: str, content: str):
        self.tag = tag
        self.content = content

    def __eq__(self, other):
        if not isinstance(other, CustomTag):
            return NotImplemented
        return self.tag == other.tag and self.content == other.content

    def __repr__(self):
        return f"CustomTag(tag={self.tag!r}, content={self.content!r})"


class Song:
    """Parsed content of one USDX song file.

    Attributes hold the zero value of their type until a tag sets them,
    except resolution (4) and calc_medley (True), which mirror the
    defaults of the USDX desktop application.
    """

    def __init__(self, dir: str = "", source_file: str = "", encoding: Optional["Encoding"] = None):
        # Caller supplied identifiers
        self.dir: str = dir
        self.source_file: str = source_file

        # Text metadata
        self.title: str = ""
        self.artist: str = ""
        self.genre: str = ""
        self.edition: str = ""
        self.creator: str = ""
        self.language: str = ""

        # Referenced media, relative to dir
        self.sound_file: str = ""
        self.cover_path: str = ""
        self.background_path: str = ""
        self.video_path: str = ""

        # Timing
        self.bpm: float = 0.0
        self.gap: float = 0.0
        self.video_gap: float = 0.0
        self.start: float = 0.0
        self.end: int = 0
        self.year: int = 0
        self.resolution: int = DEFAULT_RESOLUTION
        self.notes_gap: int = 0
        self.relative: bool = False
        self.preview_start: float = 0.0

        # Medley
        self.medley_start_beat: int = 0
        self.medley_end_beat: int = 0
        self.calc_medley: bool = True

        # Duets
        self.duet_singer_p1: str = ""
        self.duet_singer_p2: str = ""

        self.encoding: Optional["Encoding"] = encoding
        self.custom_tags: List[CustomTag] = []
        self.notes: List[str] = []

    @property
    def encoding_name(self) -> str:
        return self.encoding.name if self.encoding is not None else ""

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for JSON output; the encoding is given by name."""
        data = {key: value for key, value in vars(self).items() if key not in ("encoding", "custom_tags")}
        data["encoding"] = self.encoding_name
        data["custom_tags"] = [{"tag": t.tag, "content": t.content} for t in self.custom_tags]
        return data

    def __str__(self):
        if self.title and self.artist:
            return f"Song({self.artist} - {self.title})"
        return f"Song({self.dir}, {self.source_file})"
