import random

import pytest

from bnpair.fq import Fq
from bnpair.fq2 import Fq2
from bnpair.fq6 import FROBENIUS_COEFF_FQ6_C1, FROBENIUS_COEFF_FQ6_C2, Fq6

XI = Fq2(Fq(9), Fq(1))


@pytest.fixture
def rng():
    return random.Random(0x5962BE5D)


def _samples(rng, count=5):
    return [Fq6.random(rng) for _ in range(count)]


def test_zero_and_one():
    assert Fq6.zero().is_zero()
    assert not Fq6.one().is_zero()
    assert Fq6.one().c0 == Fq2.one()
    assert Fq6.ZERO == Fq6.zero()


def test_is_zero_considers_every_coefficient():
    assert not Fq6(0, 0, Fq2.one()).is_zero()


def test_additive_identities(rng):
    for a in _samples(rng):
        assert a + Fq6.zero() == a
        assert a + (-a) == Fq6.zero()
        assert a.double() == a + a
        assert (a - a).is_zero()


def test_multiplicative_laws(rng):
    for a, b, c in zip(_samples(rng), _samples(rng), _samples(rng)):
        assert a * Fq6.one() == a
        assert a * b == b * a
        assert (a * b) * c == a * (b * c)
        assert a * (b + c) == a * b + a * c


def test_square_matches_mul(rng):
    for a in _samples(rng):
        assert a.square() == a * a


def test_v_cubed_is_xi():
    v = Fq6(0, 1, 0)
    assert v * v * v == Fq6(XI, 0, 0)


def test_mul_by_nonresidue_is_mul_by_v(rng):
    v = Fq6(0, 1, 0)
    for a in _samples(rng):
        assert a.mul_by_nonresidue() == a * v


def test_mul_by_1(rng):
    for a in _samples(rng):
        c1 = Fq2.random(rng)
        assert a.mul_by_1(c1) == a * Fq6(0, c1, 0)


def test_mul_by_01(rng):
    for a in _samples(rng):
        c0 = Fq2.random(rng)
        c1 = Fq2.random(rng)
        assert a.mul_by_01(c0, c1) == a * Fq6(c0, c1, 0)


def test_invert(rng):
    for a in _samples(rng):
        assert a * a.invert() == Fq6.one()
        assert a.invert().invert() == a


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fq6.zero().invert()


def test_pow(rng):
    a = Fq6.random(rng)
    assert a.pow(0) == Fq6.one()
    assert a.pow(3) == a * a * a
    assert a.pow([5, 0, 0, 0]) == a.pow(5)
    assert a.pow(-1) == a.invert()


def test_frobenius_matches_pow_q(rng):
    a = Fq6.random(rng)
    assert a.frobenius_map(1) == a.pow(Fq.MODULUS)


def test_frobenius_composition(rng):
    a = Fq6.random(rng)
    b = a
    for i in range(1, 7):
        b = b.frobenius_map(1)
        assert b == a.frobenius_map(i)
    assert a.frobenius_map(6) == a


def test_frobenius_coefficients():
    q = Fq.MODULUS
    assert FROBENIUS_COEFF_FQ6_C1[0] == Fq2.one()
    for i in range(6):
        assert FROBENIUS_COEFF_FQ6_C1[i] == XI.pow((q**i - 1) // 3)
        assert FROBENIUS_COEFF_FQ6_C2[i] == FROBENIUS_COEFF_FQ6_C1[i].square()


def test_hash_and_equality(rng):
    a = Fq6.random(rng)
    b = Fq6(a.c0, a.c1, a.c2)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_scalar_embedding():
    assert Fq6.one() * 2 == Fq6.one().double()
    assert Fq6.one() + Fq2.one() == Fq6(2, 0, 0)


def test_bad_coefficient_type():
    with pytest.raises(TypeError):
        Fq6("x", 0, 0)