"""
Tag interpretation for USDX song headers.

All tag rules live in TagInterpreter.interpret: several of them depend on
state shared between tags (seen tags, duet aliases, the RELATIVE flag gating
medley beats), so they are kept in one place.
"""

import logging
from typing import List, Optional, Set

from model.diagnostics import DuplicateTagWarning, SongWarning, TagValueWarning
from model.song import CustomTag, Song
from services.usdx.encoding.registry import EncodingRegistry
from services.usdx.parsers.tags import TAG_ALIASES, USDX_TAGS
from services.usdx.parsers.values import is_off, is_yes, parse_bpm, parse_float_i18n, parse_int
from utils.logging_utils import log_debug, log_info, log_warning

logger = logging.getLogger(__name__)


class TagInterpreter:
    """Applies decoded header tags to a Song.

    One instance serves a single read; the seen-tag set and warnings list
    are never shared between reads.
    """

    def __init__(self, song: Song, registry: EncodingRegistry, warnings: Optional[List[SongWarning]] = None):
        self.song = song
        self.registry = registry
        self.warnings: List[SongWarning] = warnings if warnings is not None else []
        self._seen: Set[str] = set()

    def _mark_seen(self, tag: str) -> None:
        self._seen.add(tag)
        alias = TAG_ALIASES.get(tag)
        if alias:
            self._seen.add(alias)

    def interpret(self, tag: str, value: str) -> None:
        """
        Apply one tag to the song.

        Repeated recognized tags add a DuplicateTagWarning and still overwrite
        the earlier value. Numeric conversion failures add a TagValueWarning
        and leave the field unchanged. Unknown tags end up in custom_tags.

        Args:
            tag: Decoded tag name (case-sensitive)
            value: Decoded, untrimmed tag value
        """
        if tag in self._seen and tag in USDX_TAGS:
            self.warnings.append(DuplicateTagWarning(tag))
        self._mark_seen(tag)

        song = self.song
        try:
            if tag == "TITLE":
                song.title = value
            elif tag == "ARTIST":
                song.artist = value
            elif tag == "MP3":
                song.sound_file = value
            elif tag == "BPM":
                song.bpm = parse_bpm(value)
            elif tag == "GAP":
                song.gap = parse_float_i18n(value)
            elif tag == "COVER":
                song.cover_path = value
            elif tag == "BACKGROUND":
                song.background_path = value
            elif tag == "VIDEO":
                song.video_path = value
            elif tag == "VIDEOGAP":
                song.video_gap = parse_float_i18n(value)
            elif tag == "GENRE":
                song.genre = value
            elif tag == "EDITION":
                song.edition = value
            elif tag == "CREATOR":
                song.creator = value
            elif tag == "LANGUAGE":
                song.language = value
            elif tag == "YEAR":
                # Some files carry an empty YEAR tag; tolerated without warning
                if value != "":
                    song.year = parse_int(value)
            elif tag == "START":
                song.start = parse_float_i18n(value)
            elif tag == "END":
                song.end = parse_int(value)
            elif tag == "RESOLUTION":
                song.resolution = parse_int(value)
            elif tag == "NOTESGAP":
                song.notes_gap = parse_int(value)
            elif tag == "RELATIVE":
                if is_yes(value):
                    song.relative = True
            elif tag == "ENCODING":
                self._switch_encoding(value)
            elif tag == "PREVIEWSTART":
                song.preview_start = parse_float_i18n(value)
            elif tag == "MEDLEYSTARTBEAT":
                # Only honored if RELATIVE has not been switched on by an earlier line
                if song.relative:
                    log_warning("Ignoring medley start beat because relative is set", logger, value=value)
                else:
                    song.medley_start_beat = parse_int(value)
            elif tag == "MEDLEYENDBEAT":
                if song.relative:
                    log_warning("Ignoring medley end beat because relative is set", logger, value=value)
                else:
                    song.medley_end_beat = parse_int(value)
            elif tag == "CALCMEDLEY":
                if is_off(value):
                    song.calc_medley = False
            elif tag in ("DUETSINGERP1", "P1"):
                song.duet_singer_p1 = value
            elif tag in ("DUETSINGERP2", "P2"):
                song.duet_singer_p2 = value
            else:
                log_info("Unknown tag", logger, tag=tag, value=value)
                song.custom_tags.append(CustomTag(tag, value))
        except ValueError as e:
            log_warning(f"Failed to parse tag: {e}", logger, tag=tag, value=value)
            self.warnings.append(TagValueWarning(tag, value, e))

    def _switch_encoding(self, name: str) -> None:
        encoding = self.registry.get(name)
        if encoding is None:
            log_warning(
                "Unknown encoding, keeping current one",
                logger,
                name=name,
                current=self.song.encoding_name,
            )
            return
        log_debug(f"Switching encoding to {encoding.name}", logger)
        self.song.encoding = encoding
