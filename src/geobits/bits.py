"""Morton (Z-order) interleaving of two 32-bit values into one 64-bit value.

https://graphics.stanford.edu/~seander/bithacks.html#InterleaveBMN
"""

from __future__ import annotations

from typing import Tuple

_MASK32 = 0x00000000FFFFFFFF


def spread(x: int) -> int:
    x &= _MASK32
    x = (x | (x << 16)) & 0x0000FFFF0000FFFF
    x = (x | (x << 8)) & 0x00FF00FF00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x << 2)) & 0x3333333333333333
    x = (x | (x << 1)) & 0x5555555555555555
    return x


def squash(x: int) -> int:
    x &= 0x5555555555555555
    x = (x | (x >> 1)) & 0x3333333333333333
    x = (x | (x >> 2)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x >> 4)) & 0x00FF00FF00FF00FF
    x = (x | (x >> 8)) & 0x0000FFFF0000FFFF
    x = (x | (x >> 16)) & _MASK32
    return x


def interleave64(lat: int, lng: int) -> int:
    """Longitude lands on odd bit positions, latitude on even ones."""
    return (spread(lng) << 1) | spread(lat)


def deinterleave64(code: int) -> Tuple[int, int]:
    """Return ``(lng, lat)``."""
    return squash(code >> 1), squash(code)
