"""The degree-twelve extension Fq12 = Fq6[w] / (w^2 - v) of the BN254 base field."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from bnpair.arithmetic import limbs_to_int
from bnpair.fq import Fq
from bnpair.fq2 import Fq2
from bnpair.fq6 import Fq6

_R_INV = pow(1 << 256, -1, Fq.MODULUS)


def _mont(limbs: Sequence[int]) -> Fq:
    """Decode four little-endian limbs holding a value in Montgomery form."""
    return Fq(limbs_to_int(limbs) * _R_INV)


def _as_fq6(value: Any) -> Fq6:
    if isinstance(value, Fq6):
        return value
    if isinstance(value, (Fq2, Fq, int)) and not isinstance(value, bool):
        return Fq6(value, 0, 0)
    raise TypeError(f"cannot use {type(value).__name__} as an Fq6 coefficient")


def _fp4_square(a0: Fq2, a1: Fq2) -> tuple[Fq2, Fq2]:
    t0 = a0.square()
    t1 = a1.square()
    c0 = t1.mul_by_nonresidue() + t0
    c1 = (a0 + a1).square() - t0 - t1
    return c0, c1


class Fq12:
    """An immutable element c0 + c1 * w of Fq12, where w^2 = v."""

    ZERO: ClassVar[Fq12]
    ONE: ClassVar[Fq12]

    __slots__ = ("_c0", "_c1")

    def __init__(self, c0: Any = 0, c1: Any = 0) -> None:
        self._c0 = _as_fq6(c0)
        self._c1 = _as_fq6(c1)

    @property
    def c0(self) -> Fq6:
        return self._c0

    @property
    def c1(self) -> Fq6:
        return self._c1

    # construction

    @classmethod
    def zero(cls) -> Fq12:
        return cls(Fq6.zero(), Fq6.zero())

    @classmethod
    def one(cls) -> Fq12:
        return cls(Fq6.one(), Fq6.zero())

    @classmethod
    def random(cls, rng: Any = None) -> Fq12:
        return cls(Fq6.random(rng), Fq6.random(rng))

    # predicates

    def is_zero(self) -> bool:
        return self._c0.is_zero() and self._c1.is_zero()

    # arithmetic

    def double(self) -> Fq12:
        return Fq12(self._c0.double(), self._c1.double())

    def square(self) -> Fq12:
        a, b = self._c0, self._c1
        ab = a * b
        c0 = (b.mul_by_nonresidue() + a) * (a + b) - ab - ab.mul_by_nonresidue()
        return Fq12(c0, ab.double())

    def pow(self, exponent: int | Sequence[int]) -> Fq12:
        """Raise to an integer exponent, or one given as little-endian limbs."""
        if not isinstance(exponent, int):
            exponent = limbs_to_int(exponent)
        if exponent < 0:
            return self.invert().pow(-exponent)
        result = Fq12.one()
        for bit in bin(exponent)[2:]:
            result = result.square()
            if bit == "1":
                result = result * self
        return result

    def conjugate(self) -> Fq12:
        return Fq12(self._c0, -self._c1)

    def frobenius_map(self, power: int) -> Fq12:
        """Raise to the q^power, the power-th Frobenius endomorphism."""
        coeff = FROBENIUS_COEFF_FQ12_C1[power % 12]
        c1 = self._c1.frobenius_map(power)
        return Fq12(
            self._c0.frobenius_map(power),
            Fq6(c1.c0 * coeff, c1.c1 * coeff, c1.c2 * coeff),
        )

    def mul_by_014(self, c0: Fq2, c1: Fq2, c4: Fq2) -> Fq12:
        """Multiply by the sparse element (c0 + c1 v) + (c4 v) w."""
        aa = self._c0.mul_by_01(c0, c1)
        bb = self._c1.mul_by_1(c4)
        new_c1 = (self._c1 + self._c0).mul_by_01(c0, c1 + c4) - aa - bb
        new_c0 = bb.mul_by_nonresidue() + aa
        return Fq12(new_c0, new_c1)

    def mul_by_034(self, c0: Fq2, c3: Fq2, c4: Fq2) -> Fq12:
        """Multiply by the sparse element c0 + (c3 + c4 v) w."""
        a = self._c0
        t0 = Fq6(a.c0 * c0, a.c1 * c0, a.c2 * c0)
        t1 = self._c1.mul_by_01(c3, c4)
        t2 = (self._c0 + self._c1).mul_by_01(c0 + c3, c4) - t0
        return Fq12(t0 + t1.mul_by_nonresidue(), t2 - t1)

    def cyclotomic_square(self) -> Fq12:
        """Square an element of the cyclotomic subgroup (faster than square)."""
        a, b = self._c0, self._c1

        t3, t4 = _fp4_square(a.c0, b.c1)
        z00 = (t3 - a.c0).double() + t3
        z11 = (t4 + b.c1).double() + t4

        t3, t4 = _fp4_square(b.c0, a.c2)
        t5, t6 = _fp4_square(a.c1, b.c2)

        z01 = (t3 - a.c1).double() + t3
        z12 = (t4 + b.c2).double() + t4
        t3 = t6.mul_by_nonresidue()
        z10 = (t3 + b.c0).double() + t3
        z02 = (t5 - a.c2).double() + t5

        return Fq12(Fq6(z00, z01, z02), Fq6(z10, z11, z12))

    def invert(self) -> Fq12:
        """Return the multiplicative inverse; zero has none."""
        norm = self._c0.square() - self._c1.square().mul_by_nonresidue()
        if norm.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        t = norm.invert()
        return Fq12(self._c0 * t, -(self._c1 * t))

    @staticmethod
    def _coerce(other: object) -> Fq12 | None:
        if isinstance(other, Fq12):
            return other
        if isinstance(other, (Fq6, Fq2, Fq)) or (
            isinstance(other, int) and not isinstance(other, bool)
        ):
            return Fq12(other, 0)
        return None

    def __add__(self, other: object) -> Fq12:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fq12(self._c0 + rhs._c0, self._c1 + rhs._c1)

    __radd__ = __add__

    def __sub__(self, other: object) -> Fq12:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fq12(self._c0 - rhs._c0, self._c1 - rhs._c1)

    def __rsub__(self, other: object) -> Fq12:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Fq12:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        t0 = self._c0 * rhs._c0
        t1 = self._c1 * rhs._c1
        c1 = (self._c0 + self._c1) * (rhs._c0 + rhs._c1) - t0 - t1
        return Fq12(t0 + t1.mul_by_nonresidue(), c1)

    __rmul__ = __mul__

    def __neg__(self) -> Fq12:
        return Fq12(-self._c0, -self._c1)

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fq12):
            return NotImplemented
        return self._c0 == other._c0 and self._c1 == other._c1

    def __hash__(self) -> int:
        return hash((Fq12, self._c0, self._c1))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Fq12(c0={self._c0!r}, c1={self._c1!r})"


def _fq2(c0: Sequence[int], c1: Sequence[int] = (0, 0, 0, 0)) -> Fq2:
    return Fq2(_mont(c0), _mont(c1))


# (9 + u)^((q^i - 1) / 6) for i = 0..11
FROBENIUS_COEFF_FQ12_C1: tuple[Fq2, ...] = (
    _fq2([0xD35D438DC58F0D9D, 0x0A78EB28F5C70B3D, 0x666EA36F7879462C, 0x0E0A77C19A07DF2F]),
    _fq2(
        [0xAF9BA69633144907, 0xCA6B1D7387AFB78A, 0x11BDED5EF08A2087, 0x02F34D751A1F3A7C],
        [0xA222AE234C492D72, 0xD00F02A4565DE15B, 0xDC2FF3A253DFC926, 0x10A75716B3899551],
    ),
    _fq2([0xCA8D800500FA1BF2, 0xF0C5D61468B39769, 0x0E201271AD0D4418, 0x04290F65BAD856E6]),
    _fq2(
        [0x365316184E46D97D, 0x0AF7129ED4C96D9F, 0x659DA72FCA1009B5, 0x08116D8983A20D23],
        [0xB1DF4AF7C39C1939, 0x3D9F02878A73BF7F, 0x9B2220928CAF0AE0, 0x26684515EFF054A6],
    ),
    _fq2([0x3350C88E13E80B9C, 0x7DCE557CDB5E56B9, 0x6001B4B8B615564A, 0x2682E617020217E0]),
    _fq2(
        [0x86B76F821B329076, 0x408BF52B4D19B614, 0x53DFB9D0D985E92D, 0x051E20146982D2A7],
        [0x0FBC9CD47752EBC7, 0x6D8FFFE33415DE24, 0xBEF22CF038CF41B9, 0x15C0EDFF3C66BF54],
    ),
    _fq2([0x68C3488912EDEFAA, 0x8D087F6872AABF4F, 0x51E1A24709081231, 0x2259D6B14729C0FA]),
    _fq2(
        [0x8C84E580A568B440, 0xCD164D1DE0C21302, 0xA692585790F737D5, 0x2D7100FDC71265AD],
        [0x99FDDDF38C33CFD5, 0xC77267ED1213E931, 0xDC2052142DA18F36, 0x1FBCF75C2DA80AD7],
    ),
    _fq2([0x71930C11D782E155, 0xA6BB947CFFBE3323, 0xAA303344D4741444, 0x2C3B3F0D26594943]),
    _fq2(
        [0x05CD75FE8A3623CA, 0x8C8A57F293A85CEE, 0x52B29E86B7714EA8, 0x2852E0E95D8F9306],
        [0x8A41411F14E0E40E, 0x59E26809DDFE0B0D, 0x1D2E2523F4D24D7D, 0x09FC095CF1414B83],
    ),
    _fq2([0x08CFC388C494F1AB, 0x19B315148D1373D4, 0x584E90FDCB6C0213, 0x09E1685BDF2F8849]),
    _fq2(
        [0xB5691C94BD4A6CD1, 0x56F575661B581478, 0x64708BE5A7FB6F30, 0x2B462E5E77AECD82],
        [0x2C63EF42612A1180, 0x29F16AAE345BEC69, 0xF95E18C648B216A4, 0x1AA36073A4CAE0D4],
    ),
)

Fq12.ZERO = Fq12.zero()
Fq12.ONE = Fq12.one()