"""A 96-bit two's complement integer for detecting 64-bit overflow.

Values taken from the range [INT64_MIN, UINT64_MAX] can be added and
subtracted without the 96-bit arithmetic itself overflowing. The result
can then be checked to see whether it still fits a 64-bit integer.
"""

from __future__ import annotations

from dataclasses import dataclass

_BITS = 96
_MOD = 1 << _BITS
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_UINT64_MAX = _MASK64
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_NEG_INT64_FLOOR = _MOD - (1 << 63)


@dataclass(frozen=True)
class Int96:
    """An integer modulo 2**96, read as a signed two's complement number."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % _MOD)

    @classmethod
    def from_unsigned(cls, value: int) -> Int96:
        """Build from an unsigned 64-bit integer."""
        if not 0 <= value <= _UINT64_MAX:
            raise ValueError(f"{value} is not an unsigned 64-bit integer")
        return cls(value)

    @classmethod
    def from_signed(cls, value: int) -> Int96:
        """Build from a signed 64-bit integer."""
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"{value} is not a signed 64-bit integer")
        return cls(value)

    @property
    def high64(self) -> int:
        """The most significant 64 bits."""
        return self.value >> 32

    @property
    def low32(self) -> int:
        """The least significant 32 bits."""
        return self.value & _MASK32

    def invert(self) -> Int96:
        """Return the negated number."""
        return Int96(-self.value)

    def add(self, other: Int96) -> Int96:
        """Return the sum of this number and ``other``."""
        return Int96(self.value + other.value)

    def __neg__(self) -> Int96:
        return self.invert()

    def __add__(self, other: Int96) -> Int96:
        if not isinstance(other, Int96):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Int96) -> Int96:
        if not isinstance(other, Int96):
            return NotImplemented
        return self.add(other.invert())

    def low64(self) -> int:
        """The lowest 64 bits as an unsigned integer."""
        return self.value & _MASK64

    def is_uint64(self) -> bool:
        """Whether the number lies in [0, UINT64_MAX]."""
        return self.value <= _UINT64_MAX

    def extract_uint64(self) -> int:
        """The number as an unsigned 64-bit integer."""
        if not self.is_uint64():
            raise ValueError("value does not fit an unsigned 64-bit integer")
        return self.low64()

    def is_neg_int64(self) -> bool:
        """Whether the number lies in [INT64_MIN, 0)."""
        return self.value >= _NEG_INT64_FLOOR

    def extract_neg_int64(self) -> int:
        """The number as a negative signed 64-bit integer."""
        if not self.is_neg_int64():
            raise ValueError("value is not a negative signed 64-bit integer")
        return self.value - _MOD