import math
from fractions import Fraction

import pytest

from gmpnum import IntegerValue, NonFiniteInputError, Real50, RationalValue, extended
from gmpnum.core.float_conv import ChunkOps, convert_float


# Exact reference destination: plain Fractions, so every step is lossless.
FRACTION_OPS = ChunkOps(
    from_int=Fraction,
    shift_left=lambda x, n: x * 2 ** n,
    add=lambda x, t: x + t,
    sub=lambda x, t: x - t,
    scale_2exp=lambda x, e: x * Fraction(2) ** e,
)


class RecordingOps:
    """ChunkOps over Fractions that records the chunk sequence."""

    def __init__(self):
        self.chunks = []
        self.ops = ChunkOps(
            from_int=Fraction,
            shift_left=FRACTION_OPS.shift_left,
            add=self._add,
            sub=self._sub,
            scale_2exp=FRACTION_OPS.scale_2exp,
        )

    def _add(self, x, t):
        self.chunks.append(t)
        return x + t

    def _sub(self, x, t):
        self.chunks.append(-t)
        return x - t


@pytest.mark.parametrize(
    "a",
    [
        0.1,
        -0.1,
        2.5,
        -2.5,
        1.0 / 3.0,
        math.pi,
        1e300,
        -1e-300,
        5e-324,
        2.0 ** 80,
        123456789.0,
    ],
)
def test_convert_float_is_bit_exact(a):
    print(f"[convert_float-exact] {a!r} -> expect Fraction(a) exactly")
    assert convert_float(a, FRACTION_OPS) == Fraction(a)


def test_zero_and_one_short_circuit():
    rec = RecordingOps()
    assert convert_float(0.0, rec.ops) == 0
    assert convert_float(-0.0, rec.ops) == 0
    assert convert_float(1.0, rec.ops) == 1
    assert rec.chunks == []


def test_chunks_are_thirty_bits_wide():
    print("[convert_float-chunks] 1/3 needs two 30-bit chunks for its 53 bits")
    rec = RecordingOps()
    convert_float(1.0 / 3.0, rec.ops)
    assert len(rec.chunks) == 2
    assert all(0 <= c < 2 ** 30 for c in rec.chunks)


def test_negative_input_uses_subtracted_chunks():
    rec = RecordingOps()
    out = convert_float(-0.1, rec.ops)
    assert out == Fraction(-0.1)
    assert rec.chunks[0] < 0


@pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_rejected(bad):
    with pytest.raises(NonFiniteInputError):
        convert_float(bad, FRACTION_OPS)


# -----------------------------
# Through the value types
# -----------------------------

def test_real_extended_keeps_every_binary_digit():
    print("[real-extended] 0.1 as double = 0.1000000000000000055511151231257827021181583404541015625")
    x = Real50(extended(0.1))
    assert x.to_string(55) == "1.000000000000000055511151231257827021181583404541015625e-1"
    assert x == Real50(0.1)


def test_rational_extended_is_exact_fraction():
    r = RationalValue(extended(0.1))
    assert r.denominator == 2 ** 55
    assert Fraction(r.numerator, r.denominator) == Fraction(0.1)
    assert r == RationalValue(0.1)


@pytest.mark.parametrize(
    "a,expected",
    [
        (2.5, 2),
        (-2.5, -2),
        (0.75, 0),
        (1e20, 10 ** 20),
        (2.0 ** 80, 2 ** 80),
        (-(2.0 ** 70) - 2.0 ** 30, -(2 ** 70) - 2 ** 30),
    ],
)
def test_integer_extended_truncates_toward_zero(a, expected):
    print(f"[integer-extended] {a!r} -> expect {expected}")
    assert IntegerValue(extended(a)) == expected
