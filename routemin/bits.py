"""Bit manipulation helpers: unaligned loads and stores, bitmaps and word ops.

Loads and stores use the host byte order, as a raw memory copy would.
Bitmaps treat their data as a sequence of bytes: bit ``pos`` lives in
byte ``pos // 8`` at bit ``pos % 8``.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_U8 = struct.Struct("=B")
_U16 = struct.Struct("=H")
_U32 = struct.Struct("=I")
_U64 = struct.Struct("=Q")
_FLOAT = struct.Struct("=f")
_DOUBLE = struct.Struct("=d")

_LONG_SIZE = struct.calcsize("l")
_CHAR_BIT = 8


def load_u8(data, offset=0) -> int:
    """Read an unsigned 8-bit integer at ``offset``."""
    return _U8.unpack_from(data, offset)[0]


def load_u16(data, offset=0) -> int:
    """Read an unsigned 16-bit integer at ``offset``."""
    return _U16.unpack_from(data, offset)[0]


def load_u32(data, offset=0) -> int:
    """Read an unsigned 32-bit integer at ``offset``."""
    return _U32.unpack_from(data, offset)[0]


def load_u64(data, offset=0) -> int:
    """Read an unsigned 64-bit integer at ``offset``."""
    return _U64.unpack_from(data, offset)[0]


def load_float(data, offset=0) -> float:
    """Read a single-precision float at ``offset``."""
    return _FLOAT.unpack_from(data, offset)[0]


def load_double(data, offset=0) -> float:
    """Read a double-precision float at ``offset``."""
    return _DOUBLE.unpack_from(data, offset)[0]


def load_bool(data, offset=0) -> bool:
    """Read a one-byte boolean at ``offset``."""
    return _U8.unpack_from(data, offset)[0] != 0


def store_u8(buf, offset, value) -> None:
    """Write ``value`` truncated to 8 bits at ``offset``."""
    _U8.pack_into(buf, offset, value & 0xFF)


def store_u16(buf, offset, value) -> None:
    """Write ``value`` truncated to 16 bits at ``offset``."""
    _U16.pack_into(buf, offset, value & _MASK16)


def store_u32(buf, offset, value) -> None:
    """Write ``value`` truncated to 32 bits at ``offset``."""
    _U32.pack_into(buf, offset, value & _MASK32)


def store_u64(buf, offset, value) -> None:
    """Write ``value`` truncated to 64 bits at ``offset``."""
    _U64.pack_into(buf, offset, value & _MASK64)


def store_float(buf, offset, value) -> None:
    """Write ``value`` as a single-precision float at ``offset``."""
    _FLOAT.pack_into(buf, offset, value)


def store_double(buf, offset, value) -> None:
    """Write ``value`` as a double-precision float at ``offset``."""
    _DOUBLE.pack_into(buf, offset, value)


def store_bool(buf, offset, value) -> None:
    """Write ``value`` as a one-byte boolean at ``offset``."""
    _U8.pack_into(buf, offset, 1 if value else 0)


def bitmap_size(bit_count: int) -> int:
    """Bytes needed for a bitmap of ``bit_count`` bits, rounded up to whole words."""
    if bit_count < 0:
        raise ValueError("bit_count must be non-negative")
    word_bits = _CHAR_BIT * _LONG_SIZE
    return -(-bit_count // word_bits) * _LONG_SIZE


def bit_test(data, pos: int) -> bool:
    """Return whether bit ``pos`` is set in ``data``."""
    chunk, offset = divmod(pos, _CHAR_BIT)
    return bool((data[chunk] >> offset) & 1)


def bit_set(data, pos: int) -> bool:
    """Set bit ``pos`` in ``data`` and return its previous value."""
    chunk, offset = divmod(pos, _CHAR_BIT)
    prev = bool((data[chunk] >> offset) & 1)
    data[chunk] |= 1 << offset
    return prev


def bit_clear(data, pos: int) -> bool:
    """Clear bit ``pos`` in ``data`` and return its previous value."""
    chunk, offset = divmod(pos, _CHAR_BIT)
    prev = bool((data[chunk] >> offset) & 1)
    data[chunk] &= ~(1 << offset) & 0xFF
    return prev


def _ctz(x: int, bits: int) -> int:
    x &= (1 << bits) - 1
    if x == 0:
        return bits
    return (x & -x).bit_length() - 1


def _clz(x: int, bits: int) -> int:
    x &= (1 << bits) - 1
    return bits - x.bit_length()


def ctz_u32(x: int) -> int:
    """Number of trailing zero bits in a 32-bit word (32 for zero)."""
    return _ctz(x, 32)


def ctz_u64(x: int) -> int:
    """Number of trailing zero bits in a 64-bit word (64 for zero)."""
    return _ctz(x, 64)


def clz_u32(x: int) -> int:
    """Number of leading zero bits in a 32-bit word (32 for zero)."""
    return _clz(x, 32)


def clz_u64(x: int) -> int:
    """Number of leading zero bits in a 64-bit word (64 for zero)."""
    return _clz(x, 64)


def count_u32(x: int) -> int:
    """Number of set bits in a 32-bit word."""
    return bin(x & _MASK32).count("1")


def count_u64(x: int) -> int:
    """Number of set bits in a 64-bit word."""
    return bin(x & _MASK64).count("1")


def _check_rotation(r: int, bits: int) -> None:
    if not 0 < r < bits:
        raise ValueError(f"rotation must be in 1..{bits - 1}, got {r}")


def rotl_u32(x: int, r: int) -> int:
    """Rotate a 32-bit word left by ``r`` bits."""
    _check_rotation(r, 32)
    x &= _MASK32
    return ((x << r) | (x >> (32 - r))) & _MASK32


def rotl_u64(x: int, r: int) -> int:
    """Rotate a 64-bit word left by ``r`` bits."""
    _check_rotation(r, 64)
    x &= _MASK64
    return ((x << r) | (x >> (64 - r))) & _MASK64


def rotr_u32(x: int, r: int) -> int:
    """Rotate a 32-bit word right by ``r`` bits."""
    _check_rotation(r, 32)
    x &= _MASK32
    return ((x >> r) | (x << (32 - r))) & _MASK32


def rotr_u64(x: int, r: int) -> int:
    """Rotate a 64-bit word right by ``r`` bits."""
    _check_rotation(r, 64)
    x &= _MASK64
    return ((x >> r) | (x << (64 - r))) & _MASK64


def bswap_u16(x: int) -> int:
    """Swap the byte order of a 16-bit word."""
    return int.from_bytes((x & _MASK16).to_bytes(2, "little"), "big")


def bswap_u32(x: int) -> int:
    """Swap the byte order of a 32-bit word."""
    return int.from_bytes((x & _MASK32).to_bytes(4, "little"), "big")


def bswap_u64(x: int) -> int:
    """Swap the byte order of a 64-bit word."""
    return int.from_bytes((x & _MASK64).to_bytes(8, "little"), "big")


def _bit_index(x: int, bits: int, offset: int) -> list[int]:
    x &= (1 << bits) - 1
    indexes = []
    pos = 0
    while x:
        skip = _ctz(x, bits)
        pos += skip + 1
        x >>= skip + 1
        indexes.append(offset + pos)
    return indexes


def bit_index_u32(x: int, offset: int = 0) -> list[int]:
    """One-based positions of the set bits of a 32-bit word, plus ``offset``, ascending."""
    return _bit_index(x, 32, offset)


def bit_index_u64(x: int, offset: int = 0) -> list[int]:
    """One-based positions of the set bits of a 64-bit word, plus ``offset``, ascending."""
    return _bit_index(x, 64, offset)


def iter_bits(data, set: bool = True) -> Iterator[int]:
    """Yield, in increasing order, the zero-based positions of set (or clear) bits."""
    flip = 0 if set else 0xFF
    for byte_index, byte in enumerate(bytes(data)):
        word = byte ^ flip
        base = byte_index * _CHAR_BIT
        while word:
            low = word & -word
            yield base + low.bit_length() - 1
            word ^= low