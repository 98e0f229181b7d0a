"""
UTF-8 position mapping tests.

Checks checkpointed lookups against offsets computed with str.encode.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from utf8pack import MapperConfig
from utf8pack import UnpairedSurrogateError
from utf8pack import UTF8PositionMapper

MIXED = "a" + chr(0xE9) + chr(0x4E2D) + chr(0x1F600)


def test_ascii_fast_path() -> None:
    """
    Validates that ASCII text maps positions one to one.
    """
    mapper = UTF8PositionMapper("hello world")

    assert mapper.is_ascii_only
    assert mapper.byte_length == 11
    assert mapper.char_to_byte(5) == 5
    assert mapper.byte_to_char(11) == 11


def test_empty_sequence() -> None:
    mapper = UTF8PositionMapper("")

    assert mapper.byte_length == 0
    assert mapper.checkpoints == {0: 0}
    assert mapper.char_to_byte(0) == 0
    assert mapper.byte_to_char(0) == 0


@pytest.mark.parametrize("interval", [1, 2, 3, 256])
def test_mixed_widths(interval: int) -> None:
    """
    Validates offsets for one codepoint of each UTF-8 length.
    """
    mapper = UTF8PositionMapper(MIXED, checkpoint_interval=interval)

    assert not mapper.is_ascii_only
    assert mapper.byte_length == 10
    assert [mapper.char_to_byte(i) for i in range(5)] == [0, 1, 3, 6, 10]
    assert [mapper.byte_to_char(b) for b in (0, 1, 3, 6, 10)] == [
        0,
        1,
        2,
        3,
        4,
    ]


def test_byte_inside_sequence_rounds_up() -> None:
    """
    Validates that an offset inside a multi-byte sequence maps past it.
    """
    mapper = UTF8PositionMapper(MIXED, checkpoint_interval=1)

    assert mapper.byte_to_char(2) == 2
    assert mapper.byte_to_char(4) == 3
    assert mapper.byte_to_char(7) == 4


def test_surrogate_pair_units() -> None:
    """
    Validates that checkpoints skip the low half of a surrogate pair.
    """
    units = [0x61, 0xD83D, 0xDE00, 0x62]
    mapper = UTF8PositionMapper(units, checkpoint_interval=1)

    assert mapper.checkpoints == {0: 0, 1: 1, 5: 3, 6: 4}
    assert mapper.byte_length == 6
    assert [mapper.char_to_byte(i) for i in range(5)] == [0, 1, 5, 5, 6]
    assert mapper.byte_to_char(5) == 3


def test_lone_surrogate_fails_construction() -> None:
    with pytest.raises(UnpairedSurrogateError):
        UTF8PositionMapper("ab" + chr(0xDFFF))


@pytest.mark.parametrize("method,pos", [("char_to_byte", 5), ("byte_to_char", 11)])
def test_out_of_range(method: str, pos: int) -> None:
    mapper = UTF8PositionMapper(MIXED)

    with pytest.raises(IndexError):
        getattr(mapper, method)(pos)
    with pytest.raises(IndexError):
        getattr(mapper, method)(-1)


@pytest.mark.parametrize(
    "interval,error",
    [(0, ValueError), (-4, ValueError), ("8", TypeError), (True, TypeError)],
)
def test_config_validation(interval: object, error: type[Exception]) -> None:
    """
    Validates checkpoint interval checks in MapperConfig and the mapper.
    """
    with pytest.raises(error):
        MapperConfig(checkpoint_interval=interval)  # type: ignore[arg-type]
    with pytest.raises(error):
        UTF8PositionMapper("abc", checkpoint_interval=interval)  # type: ignore[arg-type]


@given(st.text(), st.integers(min_value=1, max_value=16))
def test_agrees_with_str_encode(text: str, interval: int) -> None:
    """
    Validates every index against the length of the encoded prefix.
    """
    mapper = UTF8PositionMapper(text, checkpoint_interval=interval)

    assert mapper.byte_length == len(text.encode("utf-8"))
    for i in range(len(text) + 1):
        byte_pos = len(text[:i].encode("utf-8"))
        assert mapper.char_to_byte(i) == byte_pos
        assert mapper.byte_to_char(byte_pos) == i
