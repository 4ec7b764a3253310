import random

import pytest

from bnpair.fq import Fq
from bnpair.fq2 import Fq2
from bnpair.fq6 import Fq6
from bnpair.fq12 import FROBENIUS_COEFF_FQ12_C1, Fq12


@pytest.fixture
def rng():
    return random.Random(0x5962BE5D)


def _cyclotomic(f: Fq12) -> Fq12:
    f1 = f.conjugate() * f.invert()
    return f1.frobenius_map(2) * f1


def test_identities(rng):
    a = Fq12.random(rng)
    assert a * Fq12.one() == a
    assert a + Fq12.zero() == a
    assert a - a == Fq12.zero()
    assert (a + (-a)).is_zero()


def test_mul_commutative_associative_distributive(rng):
    a, b, c = Fq12.random(rng), Fq12.random(rng), Fq12.random(rng)
    assert a * b == b * a
    assert (a * b) * c == a * (b * c)
    assert a * (b + c) == a * b + a * c


def test_square_and_double(rng):
    a = Fq12.random(rng)
    assert a.square() == a * a
    assert a.double() == a + a


def test_invert(rng):
    a = Fq12.random(rng)
    assert a * a.invert() == Fq12.one()
    assert a.invert().invert() == a


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fq12.zero().invert()


def test_pow_matches_repeated_mul(rng):
    a = Fq12.random(rng)
    assert a.pow(3) == a * a * a
    assert a.pow(0) == Fq12.one()
    assert a.pow(-1) == a.invert()
    assert a.pow([5, 0, 0, 0]) == a.pow(5)


def test_conjugate_twice(rng):
    a = Fq12.random(rng)
    assert a.conjugate().conjugate() == a


def test_frobenius_is_q_power(rng):
    a = Fq12.random(rng)
    assert a.frobenius_map(1) == a.pow(Fq.MODULUS)


def test_frobenius_composes(rng):
    a = Fq12.random(rng)
    b = a
    for power in range(1, 13):
        b = b.frobenius_map(1)
        assert b == a.frobenius_map(power)
    assert b == a


@pytest.mark.parametrize("i", [0, 1, 2, 3])
def test_frobenius_coefficients(i):
    nonresidue = Fq2(9, 1)
    assert FROBENIUS_COEFF_FQ12_C1[i] == nonresidue.pow((Fq.MODULUS**i - 1) // 6)


def test_mul_by_014(rng):
    a = Fq12.random(rng)
    c0, c1, c4 = Fq2.random(rng), Fq2.random(rng), Fq2.random(rng)
    sparse = Fq12(Fq6(c0, c1, 0), Fq6(0, c4, 0))
    assert a.mul_by_014(c0, c1, c4) == a * sparse


def test_mul_by_034(rng):
    a = Fq12.random(rng)
    c0, c3, c4 = Fq2.random(rng), Fq2.random(rng), Fq2.random(rng)
    sparse = Fq12(Fq6(c0, 0, 0), Fq6(c3, c4, 0))
    assert a.mul_by_034(c0, c3, c4) == a * sparse


def test_cyclotomic_square(rng):
    g = _cyclotomic(Fq12.random(rng))
    assert g.cyclotomic_square() == g.square()


def test_unitary_inverse_is_conjugate(rng):
    g = _cyclotomic(Fq12.random(rng))
    assert g * g.conjugate() == Fq12.one()


def test_hash_consistent_with_eq(rng):
    a = Fq12.random(rng)
    b = Fq12(a.c0, a.c1)
    assert a == b
    assert hash(a) == hash(b)