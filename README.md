# bnpair

Finite-field arithmetic for the BN254 (also called BN256) pairing-friendly
curve, in plain Python with no dependencies beyond the standard library.

## What it provides

- `bnpair.arithmetic`: helpers over little-endian 64-bit limbs:
  `adc`, `sbb`, `mac`, `macx`, `bigint_geq`, `mul_512`, `limbs_to_int`
  and `int_to_limbs`.
- `bnpair.fq`: `PrimeFieldElement`, a generic immutable prime-field element,
  and `Fq`, the BN254 base field with modulus
  `0x30644e72e131a029b85045b68181585d97816a916871ca8d3c208c16d87cfd47`.
  `Fq` adds `sqrt` and the constants `ZERO`, `ONE`, `NEGATIVE_ONE`,
  `MULTIPLICATIVE_GENERATOR`, `TWO_INV`, `ROOT_OF_UNITY`,
  `ROOT_OF_UNITY_INV`, `DELTA` and `ZETA`.
- `bnpair.fq2`: `Fq2 = Fq[u] / (u^2 + 1)`, with `conjugate`,
  `frobenius_map`, `mul_by_nonresidue` (multiplication by `9 + u`), `norm`,
  `legendre`, `sqrt` and a 64-byte encoding (`to_bytes` / `from_bytes`).
- `bnpair.fq6`: `Fq6 = Fq2[v] / (v^3 - (9 + u))`, with `frobenius_map`,
  `mul_by_nonresidue`, and the sparse products `mul_by_1` and `mul_by_01`.
- `bnpair.fq12`: `Fq12 = Fq6[w] / (w^2 - v)`, with `conjugate`,
  `frobenius_map`, `cyclotomic_square`, and the sparse products
  `mul_by_014` and `mul_by_034`.

All elements are immutable values. They support `+`, `-`, `*`, unary `-`
and `==`, mix with plain integers and with lower fields of the tower, and
offer `zero()`, `one()`, `random(rng)`, `is_zero()`, `double()`,
`square()`, `pow(exponent)` and `invert()`. `pow` accepts an `int` or an
exponent given as little-endian 64-bit limbs. `random` takes any object
with a `randbytes` method, such as `random.Random`; without one it uses
`secrets`.

`Fq` elements encode as 32 little-endian bytes (`to_repr` / `to_bytes`);
`Fq2` elements as 64 bytes, `c0` followed by `c1`.

## Installing

```
pip install .
```

## Examples

```python
from bnpair.fq import Fq

x = Fq(5)
assert x * x.invert() == Fq.one()
root = Fq(4).sqrt()
assert root * root == Fq(4)
assert Fq.from_repr(x.to_repr()) == x
```

```python
import random

from bnpair.fq2 import Fq2
from bnpair.fq12 import Fq12

rng = random.Random(1)

a = Fq2.random(rng)
s = (a * a).sqrt()
assert s * s == a * a
assert Fq2.from_bytes(a.to_bytes()) == a

f = Fq12.random(rng)
assert f * f.invert() == Fq12.one()
```

## Errors

- Inverting zero raises `ZeroDivisionError`.
- `sqrt` of a non-residue raises `ValueError`.
- Decoding bytes of the wrong length, or bytes that are not a canonical
  field element, raises `ValueError`.

## What it does not do

The package stops at the field tower. It has no scalar field type, no
curve points or group operations for G1 or G2, and no Miller loop, final
exponentiation or pairing. Nothing here is constant-time; it is meant for
testing, teaching and prototyping, not for protecting secrets.

## Running the tests

```
pip install .[test]
pytest
```