"""The cubic extension Fq6 = Fq2[v] / (v^3 - (9 + u)) of the BN254 base field."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from bnpair.arithmetic import limbs_to_int
from bnpair.fq import Fq
from bnpair.fq2 import Fq2

_R_INV = pow(1 << 256, -1, Fq.MODULUS)


def _mont(limbs: Sequence[int]) -> Fq:
    """Decode four little-endian limbs holding a value in Montgomery form."""
    return Fq(limbs_to_int(limbs) * _R_INV)


def _as_fq2(value: Any) -> Fq2:
    if isinstance(value, Fq2):
        return value
    if isinstance(value, (Fq, int)) and not isinstance(value, bool):
        return Fq2(value, 0)
    raise TypeError(f"cannot use {type(value).__name__} as an Fq2 coefficient")


class Fq6:
    """An immutable element c0 + c1 * v + c2 * v^2 of Fq6, where v^3 = 9 + u."""

    ZERO: ClassVar[Fq6]
    ONE: ClassVar[Fq6]

    __slots__ = ("_c0", "_c1", "_c2")

    def __init__(self, c0: Any = 0, c1: Any = 0, c2: Any = 0) -> None:
        self._c0 = _as_fq2(c0)
        self._c1 = _as_fq2(c1)
        self._c2 = _as_fq2(c2)

    @property
    def c0(self) -> Fq2:
        return self._c0

    @property
    def c1(self) -> Fq2:
        return self._c1

    @property
    def c2(self) -> Fq2:
        return self._c2

    # construction

    @classmethod
    def zero(cls) -> Fq6:
        return cls(Fq2.zero(), Fq2.zero(), Fq2.zero())

    @classmethod
    def one(cls) -> Fq6:
        return cls(Fq2.one(), Fq2.zero(), Fq2.zero())

    @classmethod
    def random(cls, rng: Any = None) -> Fq6:
        return cls(Fq2.random(rng), Fq2.random(rng), Fq2.random(rng))

    # predicates

    def is_zero(self) -> bool:
        return self._c0.is_zero() and self._c1.is_zero() and self._c2.is_zero()

    # arithmetic

    def double(self) -> Fq6:
        return Fq6(self._c0.double(), self._c1.double(), self._c2.double())

    def square(self) -> Fq6:
        a, b, c = self._c0, self._c1, self._c2
        s0 = a.square()
        s1 = (a * b).double()
        s2 = (a - b + c).square()
        s3 = (b * c).double()
        s4 = c.square()
        return Fq6(
            s3.mul_by_nonresidue() + s0,
            s4.mul_by_nonresidue() + s1,
            s1 + s2 + s3 - s0 - s4,
        )

    def pow(self, exponent: int | Sequence[int]) -> Fq6:
        """Raise to an integer exponent, or one given as little-endian limbs."""
        if not isinstance(exponent, int):
            exponent = limbs_to_int(exponent)
        if exponent < 0:
            return self.invert().pow(-exponent)
        result = Fq6.one()
        for bit in bin(exponent)[2:]:
            result = result.square()
            if bit == "1":
                result = result * self
        return result

    def frobenius_map(self, power: int) -> Fq6:
        """Raise to the q^power, the power-th Frobenius endomorphism."""
        return Fq6(
            self._c0.frobenius_map(power),
            self._c1.frobenius_map(power) * FROBENIUS_COEFF_FQ6_C1[power % 6],
            self._c2.frobenius_map(power) * FROBENIUS_COEFF_FQ6_C2[power % 6],
        )

    def mul_by_nonresidue(self) -> Fq6:
        """Multiply by the cubic non-residue v."""
        return Fq6(self._c2.mul_by_nonresidue(), self._c0, self._c1)

    def mul_by_1(self, c1: Fq2) -> Fq6:
        """Multiply by the sparse element c1 * v."""
        b_b = self._c1 * c1
        t1 = (c1 * (self._c1 + self._c2) - b_b).mul_by_nonresidue()
        t2 = c1 * (self._c0 + self._c1) - b_b
        return Fq6(t1, t2, b_b)

    def mul_by_01(self, c0: Fq2, c1: Fq2) -> Fq6:
        """Multiply by the sparse element c0 + c1 * v."""
        a_a = self._c0 * c0
        b_b = self._c1 * c1
        t1 = (c1 * (self._c1 + self._c2) - b_b).mul_by_nonresidue() + a_a
        t3 = c0 * (self._c0 + self._c2) - a_a + b_b
        t2 = (c0 + c1) * (self._c0 + self._c1) - a_a - b_b
        return Fq6(t1, t2, t3)

    def invert(self) -> Fq6:
        """Return the multiplicative inverse; zero has none."""
        a, b, c = self._c0, self._c1, self._c2
        c0 = a.square() - c.mul_by_nonresidue() * b
        c1 = c.square().mul_by_nonresidue() - a * b
        c2 = b.square() - a * c
        norm = (c * c1 + b * c2).mul_by_nonresidue() + a * c0
        if norm.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        t = norm.invert()
        return Fq6(t * c0, t * c1, t * c2)

    @staticmethod
    def _coerce(other: object) -> Fq6 | None:
        if isinstance(other, Fq6):
            return other
        if isinstance(other, (Fq2, Fq)) or (
            isinstance(other, int) and not isinstance(other, bool)
        ):
            return Fq6(other, 0, 0)
        return None

    def __add__(self, other: object) -> Fq6:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fq6(self._c0 + rhs._c0, self._c1 + rhs._c1, self._c2 + rhs._c2)

    __radd__ = __add__

    def __sub__(self, other: object) -> Fq6:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fq6(self._c0 - rhs._c0, self._c1 - rhs._c1, self._c2 - rhs._c2)

    def __rsub__(self, other: object) -> Fq6:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Fq6:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        a0, a1, a2 = self._c0, self._c1, self._c2
        b0, b1, b2 = rhs._c0, rhs._c1, rhs._c2
        a_a = a0 * b0
        b_b = a1 * b1
        c_c = a2 * b2
        t1 = ((b1 + b2) * (a1 + a2) - b_b - c_c).mul_by_nonresidue() + a_a
        t3 = (b0 + b2) * (a0 + a2) - a_a + b_b - c_c
        t2 = (b0 + b1) * (a0 + a1) - a_a - b_b + c_c.mul_by_nonresidue()
        return Fq6(t1, t2, t3)

    __rmul__ = __mul__

    def __neg__(self) -> Fq6:
        return Fq6(-self._c0, -self._c1, -self._c2)

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fq6):
            return NotImplemented
        return (self._c0, self._c1, self._c2) == (other._c0, other._c1, other._c2)

    def __hash__(self) -> int:
        return hash((Fq6, self._c0, self._c1, self._c2))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Fq6(c0={self._c0!r}, c1={self._c1!r}, c2={self._c2!r})"


def _fq2(c0: Sequence[int], c1: Sequence[int] = (0, 0, 0, 0)) -> Fq2:
    return Fq2(_mont(c0), _mont(c1))


# (9 + u)^((q^i - 1) / 3) for i = 0..5
FROBENIUS_COEFF_FQ6_C1: tuple[Fq2, ...] = (
    _fq2([0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F]),
    _fq2(
        [0xB5773B104563AB30, 0x347F91C8A9AA6454, 0x7A007127242E0991, 0x1956BCD8118214EC],
        [0x6E849F1EA0AA4757, 0xAA1C7B6D89F89141, 0xB6E713CDFAE0CA3A, 0x26694FBB4E82EBC3],
    ),
    _fq2([0x3350C88E13E80B9C, 0x7DCE557CDB5E56B9, 0x6001B4B8B615564A, 0x2682E617020217E0]),
    _fq2(
        [0xC9AF22F716AD6BAD, 0xB311782A4AA662B2, 0x19EEAF64E248C7F4, 0x20273E77E3439F82],
        [0xACC02860F7CE93AC, 0x3933D5817BA76B4C, 0x69E6188B446C8467, 0x0A46036D4417CC55],
    ),
    _fq2([0x71930C11D782E155, 0xA6BB947CFFBE3323, 0xAA303344D4741444, 0x2C3B3F0D26594943]),
    _fq2(
        [0xF91ABA2654E8E3B1, 0x4771CB2FDC92CE12, 0xDCB16AE0FC8BDF35, 0x274AA195CD9D8BE4],
        [0x5CFC50AE18811F8B, 0x4BB28433CB43988C, 0x4FD35F13C3B56219, 0x301949BD2FC8883A],
    ),
)

# (9 + u)^((2 q^i - 2) / 3) for i = 0..5
FROBENIUS_COEFF_FQ6_C2: tuple[Fq2, ...] = (
    _fq2([0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F]),
    _fq2(
        [0x7361D77F843ABE92, 0xA5BB2BD3273411FB, 0x9C941F314B3E2399, 0x15DF9CDDBB9FD3EC],
        [0x5DDDFD154BD8C949, 0x62CB29A5A4445B60, 0x37BC870A0C7DD2B9, 0x24830A9D3171F0FD],
    ),
    _fq2([0x71930C11D782E155, 0xA6BB947CFFBE3323, 0xAA303344D4741444, 0x2C3B3F0D26594943]),
    _fq2(
        [0x448A93A57B6762DF, 0xBFD62DF528FDEADF, 0xD858F5D00E9BD47A, 0x06B03D4D3476EC58],
        [0x2B19DAF4BCC936D1, 0xA1A54E7A56F4299F, 0xB533EEE05ADEAEF1, 0x170C812B84DDA0B2],
    ),
    _fq2([0x3350C88E13E80B9C, 0x7DCE557CDB5E56B9, 0x6001B4B8B615564A, 0x2682E617020217E0]),
    _fq2(
        [0x843420F1D8DADBD6, 0x31F010C9183FCDB2, 0x436330B527A76049, 0x13D47447F11ADFE4],
        [0xEF494023A857FA74, 0x2A925D02D5AB101A, 0x83B015829BA62F10, 0x2539111D0C13AEA3],
    ),
)

Fq6.ZERO = Fq6.zero()
Fq6.ONE = Fq6.one()