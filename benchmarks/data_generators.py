"""
Test data generators for UTF-8 encoding benchmarks.

Creates text with different UTF-8 length profiles:
- Pure ASCII (1 byte per codepoint)
- Latin-1 supplement heavy (2 bytes)
- CJK heavy (3 bytes)
- Emoji heavy (4 bytes, surrogate pairs in UTF-16)
- JSON documents mixing all of the above
"""

import json
import random
import string

# Seeded so benchmark groups compare like with like
_RNG_SEED = 1729
_DEFAULT_LENGTH = 10_000

_LATIN_RANGE = (0xA0, 0x17F)
_CJK_RANGE = (0x4E00, 0x9FFF)
_EMOJI_RANGE = (0x1F300, 0x1F64F)
_ASCII_ALPHABET = string.ascii_letters + string.digits + " .,;:-_"


def generate_test_data(data_type: str, length: int = _DEFAULT_LENGTH) -> str:
    """Generates benchmark text based on specified type."""
    generators = {
        "ascii": _generate_ascii,
        "latin": _generate_latin,
        "cjk": _generate_cjk,
        "emoji": _generate_emoji,
        "json_document": _generate_json_document,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_RNG_SEED), length)


def utf16_units(text: str) -> list[int]:
    """Splits text into UTF-16 code units, pairing astral characters."""
    units = []
    for char in text:
        codepoint = ord(char)
        if codepoint >= 0x10000:
            codepoint -= 0x10000
            units.append(0xD800 | (codepoint >> 10))
            units.append(0xDC00 | (codepoint & 0x3FF))
        else:
            units.append(codepoint)
    return units


def _random_range(rng: random.Random, bounds: tuple[int, int], length: int) -> str:
    low, high = bounds
    return "".join(chr(rng.randint(low, high)) for _ in range(length))


def _generate_ascii(rng: random.Random, length: int) -> str:
    """Generates ASCII text that needs no JSON escaping."""
    return "".join(rng.choice(_ASCII_ALPHABET) for _ in range(length))


def _generate_latin(rng: random.Random, length: int) -> str:
    """Generates accented Latin text, all two-byte codepoints."""
    return _random_range(rng, _LATIN_RANGE, length)


def _generate_cjk(rng: random.Random, length: int) -> str:
    """Generates CJK ideographs, all three-byte codepoints."""
    return _random_range(rng, _CJK_RANGE, length)


def _generate_emoji(rng: random.Random, length: int) -> str:
    """Generates emoji, all four-byte codepoints."""
    return _random_range(rng, _EMOJI_RANGE, length)


def _generate_json_document(rng: random.Random, length: int) -> str:
    """Generates a JSON document whose string values mix all widths."""
    records = []
    size = 0
    while size < length:
        record = {
            "id": rng.randint(1000000, 9999999),
            "name": _generate_latin(rng, 12),
            "title": _generate_cjk(rng, 8),
            "reaction": _generate_emoji(rng, 2),
            "note": _generate_ascii(rng, 40),
        }
        records.append(record)
        size += 62
    return json.dumps({"records": records}, ensure_ascii=False)
