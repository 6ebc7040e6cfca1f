"""
USDX Header Parser Module

Line scanning, BOM detection and tag interpretation for USDX song files.
The notation body after the header is collected verbatim.
"""

from services.usdx.parsers.bom import sniff_bom
from services.usdx.parsers.interpreter import TagInterpreter
from services.usdx.parsers.notes import NotesCollector
from services.usdx.parsers.tag_line import is_tag_line, iter_lines, split_tag_line
from services.usdx.parsers.tags import TAG_ALIASES, USDX_TAGS, is_usdx_tag


__all__ = [
    'sniff_bom',
    'TagInterpreter',
    'NotesCollector',
    'is_tag_line',
    'iter_lines',
    'split_tag_line',
    'TAG_ALIASES',
    'USDX_TAGS',
    'is_usdx_tag'
]
