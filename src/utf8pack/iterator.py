"""
Lazy, constant-space iteration over the UTF-8 bytes of a character sequence.

The iterator never materialises the encoded text. It holds the index of
the next unconsumed code unit and the packed bytes of the codepoint that
is currently being emitted, and nothing else.
"""

from dataclasses import dataclass
from dataclasses import replace

from .codepoints import CodeUnits
from .codepoints import encode_at
from .codepoints import encoded_length
from .codepoints import packed_length
from .codepoints import units_consumed


@dataclass(slots=True)
class CursorState:
    """
    Progress of a Utf8Iterator.

    ``position`` is the index of the next unconsumed code unit and only
    grows. ``pending`` holds the packed bytes not yet emitted for the
    current codepoint; zero means nothing is buffered.
    """

    position: int = 0
    pending: int = 0


class Utf8Iterator:
    """
    Yields the UTF-8 bytes of a str or UTF-16 code unit sequence one at a time.

    Each ``next_int()`` returns a value in 0..255 and ``next_byte()`` the
    same value as a signed byte. Encoding errors surface from the call
    that reaches the malformed unit and leave the cursor untouched, so a
    retry fails the same way.

    Not thread-safe: one iterator belongs to one caller.
    """

    __slots__ = ("_seq", "_state")

    def __init__(self, seq: CodeUnits) -> None:
        # bytes are already UTF-8
        if isinstance(seq, bytes | bytearray | memoryview) or not hasattr(
            seq, "__getitem__"
        ):
            raise TypeError(
                f"expected str or code units, not {type(seq).__name__}"
            )

        self._seq = seq
        self._state = CursorState()

    @property
    def position(self) -> int:
        return self._state.position

    @property
    def pending(self) -> int:
        return self._state.pending

    @property
    def state(self) -> CursorState:
        """Returns a snapshot of the cursor."""
        return replace(self._state)

    def has_next(self) -> bool:
        return bool(self._state.pending) or self._state.position < len(
            self._seq
        )

    def next_int(self) -> int:
        """
        Returns the next UTF-8 byte as an int in 0..255.

        Raises:
            StopIteration: If every byte has been returned
            UnpairedSurrogateError: If the next unit is a lone surrogate
            InvalidCodepointError: If the next unit is not a scalar value
        """
        state = self._state
        if not state.pending:
            if state.position >= len(self._seq):
                raise StopIteration

            packed = encode_at(self._seq, state.position)
            state.position += units_consumed(self._seq, state.position)
            if not packed:
                # NUL packs to zero, which is indistinguishable from empty
                return 0
            state.pending = packed

        b = state.pending & 0xFF
        state.pending >>= 8
        return b

    def next_byte(self) -> int:
        """Returns the next UTF-8 byte as a signed value in -128..127."""
        b = self.next_int()
        return b - 0x100 if b & 0x80 else b

    def remaining_length(self) -> int:
        """
        Returns the number of bytes still to be produced.

        Re-encodes the whole unconsumed suffix on every call, so the cost
        is linear in the remaining input. Cache the result if you need it
        more than once.
        """
        state = self._state
        length = encoded_length(self._seq, state.position)
        if state.pending:
            length += packed_length(state.pending)
        return length

    def __iter__(self) -> "Utf8Iterator":
        return self

    def __next__(self) -> int:
        return self.next_int()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._state.position}, "
            f"pending={self._state.pending:#x})"
        )


def iter_utf8(seq: CodeUnits) -> Utf8Iterator:
    """Returns an iterator over the UTF-8 bytes of seq."""
    return Utf8Iterator(seq)


__all__ = [
    "CursorState",
    "Utf8Iterator",
    "iter_utf8",
]
