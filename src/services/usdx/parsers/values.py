"""
Value conversion the way USDX does it.

Numbers are trimmed and, for decimals, only the first comma is taken as the
decimal separator. Syntax is stricter than Python's int()/float(): no digit
group underscores and no non-ASCII digits. Decimals are rounded to single
precision, so '0.1' yields 0.10000000149011612.
"""

import re
import struct

_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)

# Unicode White_Space; str.strip() would also drop the \x1c-\x1f separators
WHITESPACE = (
    " \t\n\v\f\r\x85\xa0 "
    "           "
    "    　"
)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def trim(value: str) -> str:
    return value.strip(WHITESPACE)


def to_float32(value: float) -> float:
    """
    Round value to the nearest single precision float.

    Raises:
        OverflowError: If value is finite but beyond single precision range
    """
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_float_i18n(value: str) -> float:
    """
    Parse a decimal that may use a comma as decimal separator.

    Whitespace is trimmed first, then only the first comma becomes a period,
    so '1,5,6' turns into '1.5,6' and fails.

    Raises:
        ValueError: If the value is not a decimal number or exceeds float32 range
    """
    normalized = trim(value).replace(",", ".", 1)
    if not _DECIMAL_PATTERN.fullmatch(normalized):
        raise ValueError(f"invalid decimal '{normalized}'")
    try:
        return to_float32(float(normalized))
    except OverflowError:
        raise ValueError(f"decimal '{normalized}' out of range") from None


def parse_bpm(value: str) -> float:
    """BPM replaces every comma, not just the first, before the usual decimal parse."""
    return parse_float_i18n(value.replace(",", "."))


def parse_int(value: str) -> int:
    """
    Parse a trimmed, optionally signed decimal integer.

    Raises:
        ValueError: If the value is not an integer or exceeds 64 bit range
    """
    trimmed = trim(value)
    if not _INT_PATTERN.fullmatch(trimmed):
        raise ValueError(f"invalid integer '{trimmed}'")
    result = int(trimmed)
    if not INT64_MIN <= result <= INT64_MAX:
        raise ValueError(f"integer '{trimmed}' out of range")
    return result


def is_yes(value: str) -> bool:
    return value.upper() == "YES"


def is_off(value: str) -> bool:
    return value.upper() == "OFF"
