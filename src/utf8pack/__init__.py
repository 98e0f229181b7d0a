"""
Allocation-free UTF-8 encoding of codepoints and UTF-16 code unit sequences.

Packs the 1-4 byte UTF-8 encoding of a codepoint into a single int, with
the first byte in the lowest-order lane, classifies individual UTF-8 bytes,
and iterates over the UTF-8 bytes of a sequence in constant space. Bulk
transcoding is left to ``str.encode``.
"""

from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._utf8_mapper import MapperConfig
from ._utf8_mapper import UTF8PositionMapper
from .classify import INVALID_LEADING_BYTE
from .classify import is_continuation_byte
from .classify import is_leading_byte
from .classify import num_continuation_bytes
from .classify import sequence_start
from .codepoints import MAX_CODEPOINT
from .codepoints import CodeUnits
from .codepoints import PackedUtf8
from .codepoints import encode
from .codepoints import encode_at
from .codepoints import encoded_length
from .codepoints import is_high_surrogate
from .codepoints import is_low_surrogate
from .codepoints import is_valid
from .codepoints import packed_length
from .codepoints import to_codepoint
from .codepoints import unpack
from .codepoints import units_consumed
from .codepoints import utf8_length
from .errors import InvalidCodepointError
from .errors import UnpairedSurrogateError
from .errors import Utf8EncodeError
from .iterator import CursorState
from .iterator import Utf8Iterator
from .iterator import iter_utf8

__version__ = "0.1.0"

__all__ = [
    "INVALID_LEADING_BYTE",
    "MAX_CODEPOINT",
    "CodeUnits",
    "CursorState",
    "HotPathStats",
    "InvalidCodepointError",
    "MapperConfig",
    "PackedUtf8",
    "UTF8PositionMapper",
    "UnpairedSurrogateError",
    "Utf8EncodeError",
    "Utf8Iterator",
    "clear_hot_path_stats",
    "encode",
    "encode_at",
    "encoded_length",
    "get_hot_path_stats",
    "is_continuation_byte",
    "is_high_surrogate",
    "is_leading_byte",
    "is_low_surrogate",
    "is_valid",
    "iter_utf8",
    "num_continuation_bytes",
    "packed_length",
    "sequence_start",
    "to_codepoint",
    "unpack",
    "units_consumed",
    "utf8_length",
]
