"""Prime field elements, and the base field of the BN254 curve."""

from __future__ import annotations

import functools
import secrets
from collections.abc import Sequence
from typing import Any, ClassVar, TypeVar

from bnpair.arithmetic import int_to_limbs, limbs_to_int

_T = TypeVar("_T", bound="PrimeFieldElement")


@functools.total_ordering
class PrimeFieldElement:
    """An immutable element of a prime field; subclasses set MODULUS."""

    MODULUS: ClassVar[int]
    SIZE: ClassVar[int] = 32

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, PrimeFieldElement):
            if value.MODULUS != self.MODULUS:
                raise TypeError("element belongs to a different field")
            value = value.value
        self._value = int(value) % self.MODULUS

    @property
    def value(self) -> int:
        """The canonical integer in [0, MODULUS)."""
        return self._value

    # construction

    @classmethod
    def zero(cls: type[_T]) -> _T:
        return cls(0)

    @classmethod
    def one(cls: type[_T]) -> _T:
        return cls(1)

    @classmethod
    def from_raw(cls: type[_T], limbs: Sequence[int]) -> _T:
        """Build an element from four little-endian 64-bit limbs."""
        if len(limbs) != 4:
            raise ValueError("expected 4 limbs")
        return cls(limbs_to_int(limbs))

    @classmethod
    def from_u512(cls: type[_T], limbs: Sequence[int]) -> _T:
        """Reduce a 512-bit integer given as eight little-endian limbs."""
        if len(limbs) != 8:
            raise ValueError("expected 8 limbs")
        return cls(limbs_to_int(limbs))

    @classmethod
    def from_uniform_bytes(cls: type[_T], data: bytes) -> _T:
        """Reduce a 64-byte little-endian integer modulo the field."""
        if len(data) != 64:
            raise ValueError("expected 64 bytes")
        return cls(int.from_bytes(data, "little"))

    @classmethod
    def from_repr(cls: type[_T], data: bytes) -> _T:
        """Decode 32 little-endian bytes; the value must be canonical."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes")
        value = int.from_bytes(data, "little")
        if value >= cls.MODULUS:
            raise ValueError("value is not less than the modulus")
        return cls(value)

    def to_repr(self) -> bytes:
        """Encode as 32 little-endian bytes."""
        return self._value.to_bytes(self.SIZE, "little")

    @classmethod
    def from_bytes(cls: type[_T], data: bytes) -> _T:
        return cls.from_repr(data)

    def to_bytes(self) -> bytes:
        return self.to_repr()

    @classmethod
    def random(cls: type[_T], rng: Any = None) -> _T:
        """Sample a uniform element; rng needs a randbytes method."""
        data = secrets.token_bytes(64) if rng is None else rng.randbytes(64)
        return cls.from_uniform_bytes(data)

    # predicates

    def is_zero(self) -> bool:
        return self._value == 0

    def is_odd(self) -> bool:
        return bool(self._value & 1)

    # arithmetic

    def double(self: _T) -> _T:
        return type(self)(self._value << 1)

    def square(self: _T) -> _T:
        return type(self)(self._value * self._value)

    def pow(self: _T, exponent: int | Sequence[int]) -> _T:
        """Raise to an integer exponent, or one given as little-endian limbs."""
        if not isinstance(exponent, int):
            exponent = limbs_to_int(exponent)
        if exponent < 0:
            return self.invert().pow(-exponent)
        return type(self)(pow(self._value, exponent, self.MODULUS))

    def invert(self: _T) -> _T:
        """Return the multiplicative inverse; zero has none."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return type(self)(pow(self._value, self.MODULUS - 2, self.MODULUS))

    def legendre(self) -> int:
        """Return 1 for a non-zero square, -1 for a non-square, 0 for zero."""
        symbol = pow(self._value, (self.MODULUS - 1) // 2, self.MODULUS)
        if symbol == 0:
            return 0
        return 1 if symbol == 1 else -1

    def _coerce(self, other: object) -> int | None:
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self: _T, other: object) -> _T:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(self._value + value)

    __radd__ = __add__

    def __sub__(self: _T, other: object) -> _T:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(self._value - value)

    def __rsub__(self: _T, other: object) -> _T:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(value - self._value)

    def __mul__(self: _T, other: object) -> _T:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(self._value * value)

    __rmul__ = __mul__

    def __neg__(self: _T) -> _T:
        return type(self)(-self._value)

    # comparison and conversion

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((self.MODULUS, self._value))

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self._value:0{2 * self.SIZE}x})"

    def limbs(self) -> list[int]:
        """The canonical value as four little-endian 64-bit limbs."""
        return int_to_limbs(self._value, 4)


MODULUS_STR = "0x30644e72e131a029b85045b68181585d97816a916871ca8d3c208c16d87cfd47"

# (q + 1) / 4, the square-root exponent for q = 3 mod 4.
_SQRT_EXPONENT = limbs_to_int(
    [0x4F082305B61F3F52, 0x65E05AA45A1C72A3, 0x6E14116DA0605617, 0x0C19139CB84C680A]
)


class Fq(PrimeFieldElement):
    """An element of the BN254 base field."""

    MODULUS: ClassVar[int] = int(MODULUS_STR, 16)
    MODULUS_STR: ClassVar[str] = MODULUS_STR
    NUM_BITS: ClassVar[int] = 254
    CAPACITY: ClassVar[int] = 253
    S: ClassVar[int] = 0

    ZERO: ClassVar[Fq]
    ONE: ClassVar[Fq]
    NEGATIVE_ONE: ClassVar[Fq]
    MULTIPLICATIVE_GENERATOR: ClassVar[Fq]
    TWO_INV: ClassVar[Fq]
    ROOT_OF_UNITY: ClassVar[Fq]
    ROOT_OF_UNITY_INV: ClassVar[Fq]
    DELTA: ClassVar[Fq]
    ZETA: ClassVar[Fq]

    __slots__ = ()

    def sqrt(self) -> Fq:
        """Return a square root; raise ValueError if none exists."""
        root = self.pow(_SQRT_EXPONENT)
        if root.square() != self:
            raise ValueError(f"{self!r} is not a quadratic residue")
        return root


Fq.ZERO = Fq(0)
Fq.ONE = Fq(1)
Fq.NEGATIVE_ONE = -Fq.ONE
Fq.MULTIPLICATIVE_GENERATOR = Fq(3)
Fq.TWO_INV = Fq.from_raw(
    [0x9E10460B6C3E7EA4, 0xCBC0B548B438E546, 0xDC2822DB40C0AC2E, 0x183227397098D014]
)
Fq.ROOT_OF_UNITY = Fq.from_raw(
    [0x3C208C16D87CFD46, 0x97816A916871CA8D, 0xB85045B68181585D, 0x30644E72E131A029]
)
Fq.ROOT_OF_UNITY_INV = Fq.from_raw(
    [0x3C208C16D87CFD46, 0x97816A916871CA8D, 0xB85045B68181585D, 0x30644E72E131A029]
)
Fq.DELTA = Fq(9)
Fq.ZETA = Fq.from_raw(
    [0xE4BD44E5607CFD48, 0xC28F069FBB966E3D, 0x5E6DD9E7E0ACCCB0, 0x30644E72E131A029]
)