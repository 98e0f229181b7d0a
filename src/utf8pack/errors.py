"""
Exceptions raised while packing codepoints into UTF-8.

Out-of-range indexes raise the builtin IndexError and iterator exhaustion
raises StopIteration; only encoding failures get their own types.
"""

from typing import TypeAlias

Position: TypeAlias = int


class Utf8EncodeError(ValueError):
    """
    Reports a codepoint or code unit that has no UTF-8 encoding.

    Carries the offending sequence index when the failure came from a
    character sequence, so callers can point at the bad input.
    """

    def __init__(self, msg: str, pos: Position | None = None) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if pos is not None and (not isinstance(pos, int) or pos < 0):
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.pos = pos

        if pos is None:
            super().__init__(msg)
        else:
            super().__init__(f"{msg} at index {pos}")


class InvalidCodepointError(Utf8EncodeError):
    """Raised for values outside [0, 0x10FFFF] or inside the surrogate range."""

    def __init__(self, codepoint: int, pos: Position | None = None) -> None:
        self.codepoint = codepoint
        shown = f"{codepoint:#x}" if isinstance(codepoint, int) else repr(codepoint)
        super().__init__(f"Invalid codepoint {shown}", pos)


class UnpairedSurrogateError(Utf8EncodeError):
    """Raised for a high surrogate without its low half, or a stray low one."""

    def __init__(self, msg: str, unit: int, pos: Position) -> None:
        self.unit = unit
        super().__init__(msg, pos)


__all__ = [
    "InvalidCodepointError",
    "Position",
    "UnpairedSurrogateError",
    "Utf8EncodeError",
]
