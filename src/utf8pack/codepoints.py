"""
Codepoint validation and allocation-free UTF-8 packing.

A packed encoding is a single int holding 1-4 UTF-8 bytes, one per 8-bit
lane, with the first byte of the sequence in the lowest-order lane:

    >>> hex(encode(0x80))
    '0x80c2'
    >>> unpack(encode(0x80))
    b'\\xc2\\x80'

Consumers unpack by taking ``packed & 0xFF`` and shifting right by 8 until
the accumulator reaches zero. NUL packs to ``0`` and still counts as one
byte, so "no bytes" must be tracked separately (see ``PackedUtf8``).
"""

from collections.abc import Iterator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final
from typing import TypeAlias

from ._profile import ProfileContext
from .errors import InvalidCodepointError
from .errors import UnpairedSurrogateError

# A str is indexed by code point, a Sequence[int] by UTF-16 code unit
CodeUnits: TypeAlias = str | Sequence[int]

MAX_CODEPOINT: Final = 0x10FFFF
MIN_SUPPLEMENTARY_CODEPOINT: Final = 0x10000
MIN_HIGH_SURROGATE: Final = 0xD800
MAX_HIGH_SURROGATE: Final = 0xDBFF
MIN_LOW_SURROGATE: Final = 0xDC00
MAX_LOW_SURROGATE: Final = 0xDFFF

_CONTINUATION_MARKER: Final = 0b1000_0000
_PAYLOAD_MASK: Final = 0b0011_1111
_MAX_PACKED_BYTES: Final = 4


def is_valid(codepoint: int) -> bool:
    """Returns True if codepoint is a Unicode scalar value."""
    if not isinstance(codepoint, int):
        return False
    return 0 <= codepoint <= MAX_CODEPOINT and not (
        MIN_HIGH_SURROGATE <= codepoint <= MAX_LOW_SURROGATE
    )


def is_high_surrogate(unit: int) -> bool:
    return MIN_HIGH_SURROGATE <= unit <= MAX_HIGH_SURROGATE


def is_low_surrogate(unit: int) -> bool:
    return MIN_LOW_SURROGATE <= unit <= MAX_LOW_SURROGATE


def to_codepoint(high: int, low: int) -> int:
    """Combines a high and low surrogate into a supplementary codepoint."""
    return (
        ((high - MIN_HIGH_SURROGATE) << 10)
        + (low - MIN_LOW_SURROGATE)
        + MIN_SUPPLEMENTARY_CODEPOINT
    )


def utf8_length(codepoint: int) -> int:
    """
    Returns the number of UTF-8 bytes needed for codepoint.

    Raises:
        InvalidCodepointError: If codepoint is not a Unicode scalar value
    """
    if not is_valid(codepoint):
        raise InvalidCodepointError(codepoint)
    return _byte_count(codepoint)


def _byte_count(codepoint: int) -> int:
    if codepoint < 0x80:
        return 1
    if codepoint < 0x800:
        return 2
    if codepoint < MIN_SUPPLEMENTARY_CODEPOINT:
        return 3
    return 4


def _pack(codepoint: int) -> int:
    """Packs an already validated codepoint."""
    if codepoint < 0x80:
        return codepoint

    nbytes = _byte_count(codepoint)
    leading_mask = -1 << (8 - nbytes) & 0xFF

    packed = 0
    for _ in range(nbytes - 1):
        packed |= (codepoint & _PAYLOAD_MASK) | _CONTINUATION_MARKER
        packed <<= 8
        codepoint >>= 6

    return packed | codepoint | leading_mask


def encode(codepoint: int) -> int:
    """
    Packs the UTF-8 encoding of codepoint into an int, first byte lowest.

    Args:
        codepoint: Unicode scalar value to encode

    Returns:
        Packed encoding, e.g. ``0x41`` for ``"A"`` and ``0x80C2`` for U+0080

    Raises:
        InvalidCodepointError: If codepoint is outside [0, 0x10FFFF] or a
            surrogate
    """
    if not is_valid(codepoint):
        raise InvalidCodepointError(codepoint)
    return _pack(codepoint)


def _unit_at(seq: CodeUnits, index: int) -> int:
    unit = seq[index]
    return ord(unit) if isinstance(unit, str) else unit


def _check_index(seq: CodeUnits, index: int) -> None:
    if not isinstance(index, int) or not 0 <= index < len(seq):
        raise IndexError(
            f"index {index!r} out of range for sequence of length {len(seq)}"
        )


def encode_at(seq: CodeUnits, index: int) -> int:
    """
    Packs the codepoint that begins at seq[index].

    A high surrogate is combined with the low surrogate that follows it.
    The encoder does not report how many units it read: callers advance
    by ``units_consumed(seq, index)``, which is 2 after a high surrogate.

    Raises:
        IndexError: If index is not a position in seq
        UnpairedSurrogateError: If a surrogate at index has no partner
        InvalidCodepointError: If the unit is not a Unicode scalar value
    """
    _check_index(seq, index)
    unit = _unit_at(seq, index)

    if is_high_surrogate(unit):
        if index + 1 >= len(seq):
            raise UnpairedSurrogateError("Unpaired high surrogate", unit, index)
        low = _unit_at(seq, index + 1)
        if not is_low_surrogate(low):
            raise UnpairedSurrogateError("Invalid surrogate pair", unit, index)
        codepoint = to_codepoint(unit, low)
    elif is_low_surrogate(unit):
        raise UnpairedSurrogateError("Unpaired low surrogate", unit, index)
    else:
        codepoint = unit

    if not is_valid(codepoint):
        raise InvalidCodepointError(codepoint, index)
    return _pack(codepoint)


def units_consumed(seq: CodeUnits, index: int) -> int:
    """Returns how far a cursor moves after encoding the unit at index."""
    _check_index(seq, index)
    return 2 if is_high_surrogate(_unit_at(seq, index)) else 1


def packed_length(packed: int) -> int:
    """Returns the number of bytes in a packed encoding; NUL counts as one."""
    return max(1, (packed.bit_length() + 7) // 8)


def unpack(packed: int) -> bytes:
    """Unpacks a packed encoding into its UTF-8 bytes in stream order."""
    return packed.to_bytes(packed_length(packed), "little")


def encoded_length(seq: CodeUnits, start: int = 0) -> int:
    """
    Returns the number of UTF-8 bytes needed for seq[start:].

    Runs in time linear in ``len(seq) - start`` and fails the same way
    ``encode_at`` does on the first malformed unit.
    """
    end = len(seq)
    if not isinstance(start, int) or not 0 <= start <= end:
        raise IndexError(
            f"start {start!r} out of range for sequence of length {end}"
        )

    with ProfileContext("encoded_length", end - start):
        length = 0
        index = start
        while index < end:
            length += packed_length(encode_at(seq, index))
            index += units_consumed(seq, index)
        return length


@dataclass(frozen=True, slots=True)
class PackedUtf8:
    """
    A packed encoding together with its explicit byte length.

    The bare int form cannot tell NUL apart from "no bytes"; this value
    type can, and is the preferred form outside tight loops.
    """

    value: int
    length: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError("value must be an integer")
        if self.value < 0:
            raise ValueError("value must be non-negative")
        if not 1 <= self.length <= _MAX_PACKED_BYTES:
            raise ValueError("length must be between 1 and 4")
        if self.value.bit_length() > 8 * self.length:
            raise ValueError("value does not fit in length bytes")

    @classmethod
    def from_codepoint(cls, codepoint: int) -> "PackedUtf8":
        packed = encode(codepoint)
        return cls(packed, packed_length(packed))

    @classmethod
    def from_sequence(cls, seq: CodeUnits, index: int) -> "PackedUtf8":
        packed = encode_at(seq, index)
        return cls(packed, packed_length(packed))

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[int]:
        value = self.value
        for _ in range(self.length):
            yield value & 0xFF
            value >>= 8

    def __bytes__(self) -> bytes:
        return self.value.to_bytes(self.length, "little")


__all__ = [
    "MAX_CODEPOINT",
    "MAX_HIGH_SURROGATE",
    "MAX_LOW_SURROGATE",
    "MIN_HIGH_SURROGATE",
    "MIN_LOW_SURROGATE",
    "MIN_SUPPLEMENTARY_CODEPOINT",
    "CodeUnits",
    "PackedUtf8",
    "encode",
    "encode_at",
    "encoded_length",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_valid",
    "packed_length",
    "to_codepoint",
    "unpack",
    "units_consumed",
    "utf8_length",
]
