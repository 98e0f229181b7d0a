"""
Pytest configuration and shared fixtures for utf8pack tests.

Provides immutable encoding cases covering every UTF-8 length class, NUL,
surrogate pairs given as code units and as str surrogates, and astral
characters stored directly in a str.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import pytest


def reference_utf8(units: str | Sequence[int]) -> bytes:
    """
    Encodes a str or UTF-16 code unit sequence with the standard codec.

    Round-tripping through UTF-16 joins surrogate pairs, so this also
    accepts strs holding surrogate halves as separate characters.
    """
    text = units if isinstance(units, str) else "".join(map(chr, units))
    joined = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    return joined.encode("utf-8")


@dataclass(frozen=True)
class EncodeCase:
    """
    Immutable container for a character sequence and its UTF-8 bytes.
    """

    description: str
    units: str | tuple[int, ...]
    expected: bytes


def _case(description: str, units: str | tuple[int, ...]) -> EncodeCase:
    return EncodeCase(description, units, reference_utf8(units))


@pytest.fixture
def encode_cases() -> list[EncodeCase]:
    """
    Provides valid sequences whose UTF-8 bytes are known.
    """
    return [
        _case("empty", ""),
        _case("nul", "\0"),
        _case("nul then ascii", "\0a"),
        _case("embedded nuls", "a\0b\0\0c"),
        _case("ascii", "hello world"),
        _case("two byte min", chr(0x80)),
        _case("two byte max", chr(0x7FF)),
        _case("three byte min", chr(0x800)),
        _case("three byte max", chr(0xFFFF)),
        _case("specials block", "".join(map(chr, range(0xFFFC, 0x10000)))),
        _case("surrogate pair min", (0xD800, 0xDC00)),
        _case("surrogate pair max", (0xDBFF, 0xDFFF)),
        _case("surrogate halves in str", chr(0xD83D) + chr(0xDE00)),
        _case("astral char in str", chr(0x1F600)),
        _case("mixed widths", "a" + chr(0xE9) + chr(0x4E2D) + chr(0x1F600)),
        _case("mixed code units", (0x61, 0xE9, 0x4E2D, 0xD83D, 0xDE00, 0x0)),
    ]
