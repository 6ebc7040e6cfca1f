"""
UTF-8 detection heuristic used by the Auto encoding.

Port of the byte classifier found in the USDX desktop application. Besides the
regular UTF-8 lead byte ranges it accepts a few extra continuation ranges that
reduce false negatives on some legacy non-Latin files.
"""

# (low, high, next_state) on the combined value 0x100 * state + byte
_TRANSITIONS = (
    (0x09, 0x09, 0),
    (0x0A, 0x0A, 0),
    (0x0D, 0x0D, 0),
    (0x20, 0x7E, 0),
    (0xC2, 0xDF, 1),
    (0xE0, 0xE0, 2),
    (0xE1, 0xEC, 3),
    (0xEE, 0xEF, 3),
    (0xED, 0xED, 4),
    (0xF0, 0xF0, 5),
    (0xF1, 0xF3, 6),
    (0xF4, 0xF4, 7),
    (0x180, 0x1BF, 0),
    (0x2A0, 0x2BF, 1),
    (0x380, 0x3BF, 1),
    (0x480, 0x49F, 1),
    (0x590, 0x5BF, 3),
    (0x680, 0x6BF, 3),
    (0x780, 0x78F, 3),
)


def _next_state(state: int, byte: int) -> int | None:
    c = 0x100 * state + byte
    for low, high, target in _TRANSITIONS:
        if low <= c <= high:
            return target
    return None


def is_utf8(raw: bytes) -> bool:
    """
    Return True if raw looks like UTF-8 text.

    The check is a state machine: state 0 is a character boundary, states 1-7
    wait for continuation bytes of a multi-byte sequence. Any byte without a
    transition from the current state rejects the input, and input ending
    inside a sequence is rejected as well.

    Args:
        raw: Bytes to classify

    Returns:
        True if the final state is the boundary state
    """
    state = 0
    for byte in raw:
        next_state = _next_state(state, byte)
        if next_state is None:
            return False
        state = next_state
    return state == 0
