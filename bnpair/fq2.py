"""The quadratic extension Fq2 = Fq[u] / (u^2 + 1) of the BN254 base field."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Any, ClassVar

from bnpair.arithmetic import limbs_to_int
from bnpair.fq import Fq

# (q - 3) / 4
_SQRT_EXP_A1 = limbs_to_int(
    [0x4F082305B61F3F51, 0x65E05AA45A1C72A3, 0x6E14116DA0605617, 0x0C19139CB84C680A]
)
# (q - 1) / 2
_SQRT_EXP_ALPHA = limbs_to_int(
    [0x9E10460B6C3E7EA3, 0xCBC0B548B438E546, 0xDC2822DB40C0AC2E, 0x183227397098D014]
)


def _as_fq(value: Any) -> Fq:
    if isinstance(value, Fq):
        return value
    if isinstance(value, int):
        return Fq(value)
    raise TypeError(f"cannot use {type(value).__name__} as an Fq coefficient")


@functools.total_ordering
class Fq2:
    """An immutable element c0 + c1 * u of Fq2, where u^2 = -1."""

    SIZE: ClassVar[int] = 64
    MODULUS_STR: ClassVar[str] = Fq.MODULUS_STR
    NUM_BITS: ClassVar[int] = 254
    CAPACITY: ClassVar[int] = 253
    S: ClassVar[int] = 0

    ZERO: ClassVar[Fq2]
    ONE: ClassVar[Fq2]
    MULTIPLICATIVE_GENERATOR: ClassVar[Fq2]
    TWO_INV: ClassVar[Fq2]
    ROOT_OF_UNITY: ClassVar[Fq2]
    ROOT_OF_UNITY_INV: ClassVar[Fq2]
    DELTA: ClassVar[Fq2]
    ZETA: ClassVar[Fq2]

    __slots__ = ("_c0", "_c1")

    def __init__(self, c0: Fq | int = 0, c1: Fq | int = 0) -> None:
        self._c0 = _as_fq(c0)
        self._c1 = _as_fq(c1)

    @property
    def c0(self) -> Fq:
        return self._c0

    @property
    def c1(self) -> Fq:
        return self._c1

    # construction

    @classmethod
    def zero(cls) -> Fq2:
        return cls(Fq.zero(), Fq.zero())

    @classmethod
    def one(cls) -> Fq2:
        return cls(Fq.one(), Fq.zero())

    @classmethod
    def from_int(cls, value: int) -> Fq2:
        """Embed an integer (or bool) into the base field part."""
        return cls(Fq(int(value)), Fq.zero())

    @classmethod
    def random(cls, rng: Any = None) -> Fq2:
        return cls(Fq.random(rng), Fq.random(rng))

    @classmethod
    def from_bytes(cls, data: bytes) -> Fq2:
        """Decode 64 bytes: c0 then c1, each 32 canonical little-endian bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes")
        return cls(Fq.from_bytes(data[:32]), Fq.from_bytes(data[32:]))

    def to_bytes(self) -> bytes:
        return self._c0.to_bytes() + self._c1.to_bytes()

    @classmethod
    def from_uniform_bytes(cls, data: bytes) -> Fq2:
        """Reduce 64 uniform bytes into the base field part."""
        return cls(Fq.from_uniform_bytes(data), Fq.zero())

    # predicates

    def is_zero(self) -> bool:
        return self._c0.is_zero() and self._c1.is_zero()

    def is_odd(self) -> bool:
        return bool(self.to_bytes()[0] & 1)

    # arithmetic

    def double(self) -> Fq2:
        return Fq2(self._c0.double(), self._c1.double())

    def square(self) -> Fq2:
        a, b = self._c0, self._c1
        ab = a * b
        return Fq2((a + b) * (a - b), ab.double())

    def pow(self, exponent: int | Sequence[int]) -> Fq2:
        """Raise to an integer exponent, or one given as little-endian limbs."""
        if not isinstance(exponent, int):
            exponent = limbs_to_int(exponent)
        if exponent < 0:
            return self.invert().pow(-exponent)
        result = Fq2.one()
        for bit in bin(exponent)[2:]:
            result = result.square()
            if bit == "1":
                result = result * self
        return result

    def conjugate(self) -> Fq2:
        return Fq2(self._c0, -self._c1)

    def frobenius_map(self, power: int) -> Fq2:
        return self.conjugate() if power % 2 else self

    def mul_by_nonresidue(self) -> Fq2:
        """Multiply by the quadratic non-residue 9 + u."""
        x, y = self._c0, self._c1
        return Fq2(x * 9 - y, y * 9 + x)

    def invert(self) -> Fq2:
        """Return the multiplicative inverse; zero has none."""
        norm = self.norm()
        if norm.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        t = norm.invert()
        return Fq2(self._c0 * t, -(self._c1 * t))

    def norm(self) -> Fq:
        """The norm c0^2 + c1^2 down to Fq."""
        return self._c0.square() + self._c1.square()

    def legendre(self) -> int:
        return self.norm().legendre()

    def sqrt(self) -> Fq2:
        """Return a square root; raise ValueError if none exists."""
        if self.is_zero():
            return Fq2.zero()
        a1 = self.pow(_SQRT_EXP_A1)
        alpha = a1.square() * self
        a0 = alpha.frobenius_map(1) * alpha
        neg_one = Fq2(Fq.NEGATIVE_ONE, Fq.zero())
        if a0 == neg_one:
            raise ValueError(f"{self!r} is not a quadratic residue")
        a1 = a1 * self
        if alpha == neg_one:
            return a1 * Fq2(Fq.zero(), Fq.one())
        return a1 * (alpha + Fq2.one()).pow(_SQRT_EXP_ALPHA)

    @staticmethod
    def _coerce(other: object) -> Fq2 | None:
        if isinstance(other, Fq2):
            return other
        if isinstance(other, Fq) or (
            isinstance(other, int) and not isinstance(other, bool)
        ):
            return Fq2(other, 0)
        return None

    def __add__(self, other: object) -> Fq2:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fq2(self._c0 + rhs._c0, self._c1 + rhs._c1)

    __radd__ = __add__

    def __sub__(self, other: object) -> Fq2:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fq2(self._c0 - rhs._c0, self._c1 - rhs._c1)

    def __rsub__(self, other: object) -> Fq2:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Fq2:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a0, a1 = self._c0, self._c1
        b0, b1 = rhs._c0, rhs._c1
        return Fq2(a0 * b0 - a1 * b1, a0 * b1 + a1 * b0)

    __rmul__ = __mul__

    def __neg__(self) -> Fq2:
        return Fq2(-self._c0, -self._c1)

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fq2):
            return NotImplemented
        return self._c0 == other._c0 and self._c1 == other._c1

    def __lt__(self, other: object) -> bool:
        """Lexicographic order: c1 first, then c0."""
        if not isinstance(other, Fq2):
            return NotImplemented
        return (self._c1, self._c0) < (other._c1, other._c0)

    def __hash__(self) -> int:
        return hash((Fq2, self._c0, self._c1))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Fq2(c0={self._c0!r}, c1={self._c1!r})"


Fq2.ZERO = Fq2.zero()
Fq2.ONE = Fq2.one()
Fq2.MULTIPLICATIVE_GENERATOR = Fq2(Fq(3), Fq.zero())
Fq2.TWO_INV = Fq2(Fq.TWO_INV, Fq.zero())
Fq2.ROOT_OF_UNITY = Fq2.zero()
Fq2.ROOT_OF_UNITY_INV = Fq2.zero()
Fq2.DELTA = Fq2.zero()
Fq2.ZETA = Fq2(
    Fq.from_raw([0x5763473177FFFFFE, 0xD4F263F1ACDB5C4F, 0x59E26BCEA0D48BAC, 0]),
    Fq.zero(),
)