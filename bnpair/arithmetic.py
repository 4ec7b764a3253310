"""Multi-precision helpers over 64-bit limbs stored little-endian."""

from __future__ import annotations

from collections.abc import Sequence

MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1


def adc(a: int, b: int, carry: int) -> tuple[int, int]:
    """Compute a + b + carry, returning the low limb and the new carry."""
    ret = a + b + carry
    return ret & MASK64, (ret >> 64) & MASK64


def sbb(a: int, b: int, borrow: int) -> tuple[int, int]:
    """Compute a - (b + borrow), returning the low limb and the new borrow.

    The incoming borrow is taken from its top bit; the outgoing borrow is
    either 0 or 0xffff_ffff_ffff_ffff.
    """
    ret = (a - (b + (borrow >> 63))) & _MASK128
    return ret & MASK64, (ret >> 64) & MASK64


def mac(a: int, b: int, c: int, carry: int) -> tuple[int, int]:
    """Compute a + b * c + carry, returning the low limb and the new carry."""
    ret = a + b * c + carry
    return ret & MASK64, (ret >> 64) & MASK64


def macx(a: int, b: int, c: int) -> tuple[int, int]:
    """Compute a + b * c, returning the low limb and the new carry."""
    ret = a + b * c
    return ret & MASK64, (ret >> 64) & MASK64


def bigint_geq(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return whether the little-endian limb sequence a is >= b."""
    return tuple(reversed(a)) >= tuple(reversed(b))


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Join little-endian 64-bit limbs into an integer."""
    value = 0
    for limb in reversed(limbs):
        if not 0 <= limb <= MASK64:
            raise ValueError(f"limb out of range: {limb}")
        value = (value << 64) | limb
    return value


def int_to_limbs(value: int, count: int) -> list[int]:
    """Split a non-negative integer into `count` little-endian 64-bit limbs."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value >> (64 * count):
        raise ValueError(f"value does not fit in {count} limbs")
    return [(value >> (64 * i)) & MASK64 for i in range(count)]


def mul_512(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply two 4-limb integers into an 8-limb product."""
    return int_to_limbs(limbs_to_int(a) * limbs_to_int(b), 8)