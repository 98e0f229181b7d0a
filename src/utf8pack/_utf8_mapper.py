"""Position mapping between code unit indexes and UTF-8 byte offsets."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Final

from ._profile import ProfileContext
from .codepoints import CodeUnits
from .codepoints import encode_at
from .codepoints import packed_length
from .codepoints import units_consumed


@dataclass(frozen=True)
class MapperConfig:
    """
    Configures checkpoint density for UTF8PositionMapper.

    Smaller intervals make lookups cheaper at the cost of more checkpoints.
    """

    checkpoint_interval: int = 256

    def __post_init__(self) -> None:
        if not isinstance(self.checkpoint_interval, int) or isinstance(
            self.checkpoint_interval, bool
        ):
            raise TypeError("checkpoint_interval must be an integer")
        if self.checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be positive")


class UTF8PositionMapper:
    """Efficient UTF-8 position mapping with checkpoint system.

    Instead of encoding the whole sequence, this mapper walks it once with
    the packed encoder, records a checkpoint every ``checkpoint_interval``
    code units, and answers lookups by walking forward from the nearest
    checkpoint. Checkpoints never fall between the halves of a surrogate
    pair.
    """

    def __init__(self, seq: CodeUnits, checkpoint_interval: int = 256) -> None:
        """Initialize position mapper with checkpoint system.

        Args:
            seq: The str or code unit sequence to map
            checkpoint_interval: Code units between checkpoints (default 256)

        Raises:
            UnpairedSurrogateError: If seq holds a lone surrogate
            InvalidCodepointError: If seq holds a value with no encoding
        """
        config = MapperConfig(checkpoint_interval=checkpoint_interval)
        self.seq: Final = seq
        self.checkpoint_interval: Final = config.checkpoint_interval
        self.checkpoints: dict[int, int] = {}  # byte_pos -> unit index
        self._is_ascii_only: bool = True
        self._byte_length: int = 0

        self._build_checkpoints()

        # Parallel sorted views for bisection
        self._checkpoint_bytes = list(self.checkpoints)
        self._checkpoint_units = list(self.checkpoints.values())

    def _build_checkpoints(self) -> None:
        """Build checkpoint mapping at regular code unit intervals."""
        end = len(self.seq)
        with ProfileContext("build_checkpoints", end):
            byte_pos = 0
            index = 0
            next_checkpoint = 0

            while index < end:
                if index >= next_checkpoint:
                    self.checkpoints[byte_pos] = index
                    next_checkpoint = (
                        index // self.checkpoint_interval + 1
                    ) * self.checkpoint_interval

                nbytes = packed_length(encode_at(self.seq, index))
                if nbytes > 1:
                    self._is_ascii_only = False

                byte_pos += nbytes
                index += units_consumed(self.seq, index)

            # Always store final position
            self.checkpoints[byte_pos] = end
            self._byte_length = byte_pos

    @property
    def byte_length(self) -> int:
        return self._byte_length

    @property
    def is_ascii_only(self) -> bool:
        return self._is_ascii_only

    def byte_to_char(self, byte_pos: int) -> int:
        """Convert byte offset to code unit index.

        An offset inside a multi-byte sequence maps to the index just past
        the codepoint that contains it.

        Args:
            byte_pos: Byte offset in the UTF-8 encoding, 0..byte_length

        Returns:
            Code unit index in the original sequence
        """
        if not 0 <= byte_pos <= self._byte_length:
            raise IndexError(f"byte position {byte_pos} out of range")

        # Fast path for ASCII-only text
        if self._is_ascii_only:
            return byte_pos

        slot = bisect_right(self._checkpoint_bytes, byte_pos) - 1
        current_byte = self._checkpoint_bytes[slot]
        current_index = self._checkpoint_units[slot]

        # Walk forward from checkpoint to target position
        while current_byte < byte_pos:
            current_byte += packed_length(encode_at(self.seq, current_index))
            current_index += units_consumed(self.seq, current_index)

        return current_index

    def char_to_byte(self, index: int) -> int:
        """Convert code unit index to byte offset.

        An index that points at the low half of a surrogate pair maps to
        the offset just past the pair.

        Args:
            index: Code unit index in the original sequence, 0..len(seq)

        Returns:
            Byte offset in the UTF-8 encoding
        """
        if not 0 <= index <= len(self.seq):
            raise IndexError(f"index {index} out of range")

        # Fast path for ASCII-only text
        if self._is_ascii_only:
            return index

        slot = bisect_right(self._checkpoint_units, index) - 1
        byte_pos = self._checkpoint_bytes[slot]
        current_index = self._checkpoint_units[slot]

        while current_index < index:
            byte_pos += packed_length(encode_at(self.seq, current_index))
            current_index += units_consumed(self.seq, current_index)

        return byte_pos
