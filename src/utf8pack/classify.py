"""
Bit-pattern classification of individual UTF-8 bytes.

These functions accept a byte either unsigned (0..255) or signed
(-128..127); anything outside [-128, 255] must be masked by the caller.
They never validate a whole stream.
"""

from collections.abc import Sequence
from typing import Final

# Returned by num_continuation_bytes for bytes that cannot start a sequence
INVALID_LEADING_BYTE: Final = -1

_CONTINUATION_MASK: Final = 0b1100_0000
_CONTINUATION_BITS: Final = 0b1000_0000
_MAX_CONTINUATION_BYTES: Final = 3


def is_continuation_byte(b: int) -> bool:
    """Returns True iff b matches the bit pattern 10xxxxxx."""
    return (b & _CONTINUATION_MASK) == _CONTINUATION_BITS


def num_continuation_bytes(b: int) -> int:
    """
    Returns how many continuation bytes follow the leading byte b.

    Returns 0 for ASCII, 1-3 for the 110xxxxx, 1110xxxx and 11110xxx
    prefixes, and a negative number for a continuation byte or 11111xxx.
    Only the sign of a negative result is meaningful.
    """
    leading_ones = 8 - (~b & 0xFF).bit_length()
    if leading_ones == 0:
        return 0
    if leading_ones == 1 or leading_ones > _MAX_CONTINUATION_BYTES + 1:
        return INVALID_LEADING_BYTE
    return leading_ones - 1


def is_leading_byte(b: int) -> bool:
    """Returns True if b can begin a UTF-8 sequence."""
    return num_continuation_bytes(b) >= 0


def sequence_start(buf: Sequence[int], pos: int) -> int:
    """
    Returns the index of the byte that begins the sequence holding buf[pos].

    Walks back over at most three continuation bytes, so a reader that
    lands mid-stream can resynchronise. Malformed input is not detected:
    a run of stray continuation bytes simply stops the walk early.

    Raises:
        IndexError: If pos is not a position in buf
    """
    if not isinstance(pos, int) or not 0 <= pos < len(buf):
        raise IndexError(f"pos {pos!r} out of range for buffer of length {len(buf)}")

    start = pos
    while (
        start > 0
        and pos - start < _MAX_CONTINUATION_BYTES
        and is_continuation_byte(buf[start])
    ):
        start -= 1
    return start


__all__ = [
    "INVALID_LEADING_BYTE",
    "is_continuation_byte",
    "is_leading_byte",
    "num_continuation_bytes",
    "sequence_start",
]
