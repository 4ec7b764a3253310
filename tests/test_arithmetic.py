import random

import pytest

from bnpair.arithmetic import (
    MASK64,
    adc,
    bigint_geq,
    int_to_limbs,
    limbs_to_int,
    mac,
    macx,
    mul_512,
    sbb,
)


def _words(seed, n):
    rng = random.Random(seed)
    return [rng.getrandbits(64) for _ in range(n)]


@pytest.mark.parametrize("seed", range(5))
def test_adc_recomposes(seed):
    a, b = _words(seed, 2)
    for carry in (0, 1):
        lo, hi = adc(a, b, carry)
        assert lo + (hi << 64) == a + b + carry
        assert hi in (0, 1)


def test_adc_overflow_carries():
    assert adc(MASK64, 1, 0) == (0, 1)


@pytest.mark.parametrize("seed", range(5))
def test_sbb_borrow(seed):
    a, b = _words(seed, 2)
    lo, borrow = sbb(a, b, 0)
    if a >= b:
        assert (lo, borrow) == (a - b, 0)
    else:
        assert (lo, borrow) == (a - b + (1 << 64), MASK64)


def test_sbb_propagates_incoming_borrow():
    lo, borrow = sbb(5, 2, MASK64)
    assert (lo, borrow) == (2, 0)
    lo, borrow = sbb(0, 0, MASK64)
    assert (lo, borrow) == (MASK64, MASK64)


@pytest.mark.parametrize("seed", range(5))
def test_mac_and_macx_recompose(seed):
    a, b, c, carry = _words(seed, 4)
    lo, hi = mac(a, b, c, carry)
    assert lo + (hi << 64) == a + b * c + carry
    lo, hi = macx(a, b, c)
    assert lo + (hi << 64) == a + b * c


def test_mac_maximum_fits():
    lo, hi = mac(MASK64, MASK64, MASK64, MASK64)
    assert hi == MASK64 and lo == MASK64


@pytest.mark.parametrize("seed", range(8))
def test_bigint_geq_matches_integer_order(seed):
    a = _words(seed, 4)
    b = _words(seed + 100, 4)
    assert bigint_geq(a, b) == (limbs_to_int(a) >= limbs_to_int(b))
    assert bigint_geq(a, a)


def test_bigint_geq_high_limb_dominates():
    assert bigint_geq([0, 0, 0, 1], [MASK64, MASK64, MASK64, 0])
    assert not bigint_geq([MASK64, MASK64, MASK64, 0], [0, 0, 0, 1])


@pytest.mark.parametrize("seed", range(5))
def test_mul_512_is_product(seed):
    a = _words(seed, 4)
    b = _words(seed + 50, 4)
    product = mul_512(a, b)
    assert len(product) == 8
    assert limbs_to_int(product) == limbs_to_int(a) * limbs_to_int(b)


@pytest.mark.parametrize("seed", range(5))
def test_limbs_round_trip(seed):
    limbs = _words(seed, 4)
    assert int_to_limbs(limbs_to_int(limbs), 4) == limbs


def test_int_to_limbs_rejects_bad_values():
    with pytest.raises(ValueError):
        int_to_limbs(-1, 4)
    with pytest.raises(ValueError):
        int_to_limbs(1 << 256, 4)
    with pytest.raises(ValueError):
        limbs_to_int([1 << 64])