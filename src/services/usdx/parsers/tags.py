"""Tag names understood by the USDX desktop application."""

USDX_TAGS = frozenset({
    "TITLE",
    "ARTIST",
    "MP3",
    "BPM",
    "GAP",
    "COVER",
    "BACKGROUND",
    "VIDEO",
    "VIDEOGAP",
    "GENRE",
    "EDITION",
    "CREATOR",
    "LANGUAGE",
    "YEAR",
    "START",
    "END",
    "RESOLUTION",
    "NOTESGAP",
    "RELATIVE",
    "ENCODING",
    "PREVIEWSTART",
    "MEDLEYSTARTBEAT",
    "MEDLEYENDBEAT",
    "CALCMEDLEY",
    "DUETSINGERP1",
    "DUETSINGERP2",
    "P1",
    "P2",
})

# Duet singer tags and their short forms name the same field
TAG_ALIASES = {
    "DUETSINGERP1": "P1",
    "DUETSINGERP2": "P2",
    "P1": "DUETSINGERP1",
    "P2": "DUETSINGERP2",
}


def is_usdx_tag(tag: str) -> bool:
    return tag in USDX_TAGS
