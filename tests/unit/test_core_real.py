import copy

import pytest

from gmpnum import (
    NativeKind,
    NativeRangeError,
    NonFiniteInputError,
    PrecisionError,
    Real50,
    Real100,
    RealValue,
    bits_for,
    extended,
    fixed_real,
    signed,
    unsigned,
)


# -----------------------------
# Construction & rendering
# -----------------------------

def test_one_and_half_renders_exactly(one_and_half):
    print("[real-1.5] Real50(1.5) -> expect '1.5'")
    assert one_and_half.to_string() == "1.5"
    assert str(one_and_half) == "1.5"


@pytest.mark.parametrize(
    "source,expected",
    [
        (0, "0"),
        (100, "100"),
        (-7, "-7"),
        (-2.5, "-2.5"),
        (0.25, "2.5e-1"),
        (-0.25, "-2.5e-1"),
        (10 ** 18, "1" + "0" * 18),
        ("123456789012345678901234567", "1.23456789012345678901234567e26"),
        (-0.0009765625, "-9.765625e-4"),
    ],
)
def test_to_string_fixed_vs_scientific(source, expected):
    print(f"[real-to_string] {source!r} -> expect {expected!r}")
    assert Real50(source).to_string() == expected


def test_to_string_digit_request_rounds():
    print("[real-to_string-digits] 123.456 at 20 digits -> '1.23456e2'")
    assert Real50("123.456").to_string(20) == "1.23456e2"
    assert Real50(2).to_string(10, scientific=True) == "2."


def test_negative_zero_renders_as_zero():
    z = Real50(-0.0)
    assert z.to_string() == "0"
    assert z.sign() == 0
    assert z.is_zero()


def test_assignment_from_every_native_kind():
    x = Real50()
    assert x.is_zero()
    assert x.assign(unsigned(2 ** 64 - 1)) == 2 ** 64 - 1
    assert x.assign(signed(-(2 ** 63))) == -(2 ** 63)
    assert x.assign(0.5) == Real50("0.5")
    assert x.assign(extended(0.5)) == Real50("0.5")
    assert x.assign("-42") == -42


@pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_floats_rejected(bad):
    print(f"[real-non-finite] {bad!r} -> expect NonFiniteInputError")
    with pytest.raises(NonFiniteInputError):
        Real50(bad)
    with pytest.raises(NonFiniteInputError):
        Real50(extended(bad))


def test_malformed_string_propagates_engine_error():
    with pytest.raises(ValueError):
        Real50("not-a-number")


def test_unsupported_source_type():
    with pytest.raises(TypeError):
        Real50([1, 2])


# -----------------------------
# Precision lifecycle
# -----------------------------

def test_dynamic_defaults_and_explicit_request():
    assert RealValue().precision == 50
    x = RealValue(1, 120)
    assert x.precision == 120
    assert x.bits == bits_for(120)


def test_copy_construct_uses_destination_precision(third_20):
    print("[real-copy] 1/3@20 copied into a 60-digit value -> precision 60, same value")
    wide = RealValue(third_20, 60)
    assert wide.precision == 60
    assert wide.bits == bits_for(60)
    assert wide == third_20
    default = RealValue(third_20)
    assert default.precision == 50


def test_assign_keeps_destination_precision():
    print("[real-assign] assigning a 10-digit 2 into a 60-digit value keeps 60 digits")
    dest = RealValue(0, 60)
    dest.assign(RealValue(2, 10))
    assert dest.precision == 60
    assert dest.sqrt() == RealValue(2, 60).sqrt()
    assert dest.sqrt() != RealValue(2, 10).sqrt()


def test_narrow_copy_rounds_to_destination():
    wide = RealValue(2, 60).sqrt()
    narrow = RealValue(wide, 10)
    assert narrow == RealValue(2, 10).sqrt()


def test_precision_change_reallocates_and_keeps_value():
    root = RealValue(2, 10).sqrt()
    x = root.copy()
    x.precision = 60
    assert x.precision == 60
    assert x.bits == bits_for(60)
    assert x == root
    x.precision = 10
    assert x == root


def test_precision_shrink_rounds_current_value():
    x = RealValue(2, 60).sqrt()
    x.precision = 10
    assert x == RealValue(2, 10).sqrt()


def test_fixed_types_are_cached_and_read_only():
    assert fixed_real(50) is Real50
    assert Real50.is_fixed() and not RealValue.is_fixed()
    x = Real50(1)
    assert x.precision == 50
    assert Real50(1, 50) == x
    with pytest.raises(PrecisionError):
        x.precision = 60
    with pytest.raises(PrecisionError):
        Real50(1, 60)
    with pytest.raises(PrecisionError):
        fixed_real(0)


def test_fixed_ignores_shared_default():
    RealValue.set_default_precision(20)
    assert Real100(1).precision == 100
    assert RealValue(1).precision == 20


def test_copy_protocol_and_swap():
    a = RealValue(3, 30)
    b = copy.copy(a)
    c = copy.deepcopy(a)
    b += 1
    assert a == 3 and b == 4 and c == 3
    assert b.precision == 30
    d = RealValue(9, 70)
    a.swap(d)
    assert a == 9 and a.precision == 70
    assert d == 3 and d.precision == 30
    with pytest.raises(TypeError):
        a.swap(Real50(1))


# -----------------------------
# Arithmetic
# -----------------------------

def test_binary_operators_allocate():
    x = Real50(6)
    y = Real50(4)
    assert x + y == 10
    assert x - y == 2
    assert x * y == 24
    assert (x / y).to_string() == "1.5"
    assert x == 6 and y == 4


def test_native_integer_operands_both_sides():
    x = Real50(5)
    assert x + 2 == 7
    assert 2 - x == -3
    assert x * -2 == -10
    assert (1 / Real50(4)).to_string() == "2.5e-1"
    assert isinstance(2 * x, Real50)


def test_inplace_operators_mutate_same_object():
    x = Real50(1)
    alias = x
    x += 1
    x *= 3
    x -= Real50(2)
    x /= 8
    assert alias is x
    assert x.to_string() == "5.e-1"


def test_result_precision_follows_left_operand():
    a = RealValue(1, 20)
    b = RealValue(3, 80)
    assert (a / b).precision == 20
    assert (b / a).precision == 80
    assert (1 / b).precision == 80


@pytest.mark.parametrize(
    "call",
    [
        lambda: Real50(1) + Real100(1),
        lambda: RealValue(1) + Real50(1),
        lambda: Real50(1) + 1.5,
        lambda: Real50(1) * "2",
    ],
)
def test_mixed_types_rejected(call):
    with pytest.raises(TypeError):
        call()


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Real50(1) / 0
    with pytest.raises(ZeroDivisionError):
        Real50(1) / Real50(0)


def test_negate_and_unary():
    x = Real50(2.5)
    y = -x
    assert y == Real50(-2.5) and x == Real50(2.5)
    x.negate()
    assert x.sign() == -1
    assert abs(x) == Real50(2.5)
    assert +x == x


# -----------------------------
# Comparison
# -----------------------------

def test_compare_tri_state():
    a, b = Real50(2), Real50(3)
    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert a.compare(2) == 0
    assert a.compare(1.5) == 1
    assert a.compare("2.5") == -1
    assert a < b <= 3 and b > 2 and a != b
    with pytest.raises(TypeError):
        a.compare(Real100(2))


def test_values_are_unhashable():
    with pytest.raises(TypeError):
        hash(Real50(1))


# -----------------------------
# Functions
# -----------------------------

@pytest.mark.parametrize(
    "fn,expected",
    [
        ("floor", -3),
        ("ceil", -2),
        ("trunc", -2),
    ],
)
def test_rounding_functions(fn, expected):
    assert getattr(Real50(-2.5), fn)() == expected


def test_sqrt_is_correctly_rounded():
    r = Real50(2).sqrt()
    assert (r * r - 2).to_double() == pytest.approx(0.0, abs=1e-48)
    assert Real50(16).sqrt() == 4


def test_ldexp_frexp():
    assert Real50(3).ldexp(-1).to_string() == "1.5"
    assert Real50(3).ldexp(4) == 48
    m, e = Real50(12).frexp()
    assert e == 4
    assert m.to_double() == 0.75
    m, e = Real50(-0.375).frexp()
    assert (m.to_double(), e) == (-0.75, -1)
    m, e = Real50(0).frexp()
    assert m.is_zero() and e == 0


# -----------------------------
# Extraction
# -----------------------------

def test_extraction_to_native():
    x = Real50(-2.75)
    assert x.to_double() == -2.75
    assert float(x) == -2.75
    assert x.to_signed() == -2
    assert int(x) == -2
    assert Real50(2.75).to_unsigned() == 2
    assert x.convert_to(float) == -2.75
    assert x.convert_to(NativeKind.SIGNED) == -2
    assert x.convert_to(str) == "-2.75"


def test_extraction_range_checked():
    with pytest.raises(NativeRangeError):
        Real50(-1).to_unsigned()
    with pytest.raises(NativeRangeError):
        Real50(2 ** 63).to_signed()
    assert Real50(2 ** 63).to_unsigned() == 2 ** 63
    assert int(Real50("1e30")) == 10 ** 30


def test_repr():
    assert repr(Real50(1.5)) == "Real50('1.5')"
    assert repr(RealValue(2, 30)) == "RealValue('2', digits10=30)"


# -----------------------------
# Values beyond the double range
# -----------------------------

@pytest.mark.parametrize("text", ["1e2000000000", "-1.5e-2000000000", "7e-400"])
def test_round_trip_beyond_double_range(text):
    print(f"[real-extreme] {text} -> scientific text -> same value")
    x = Real50(text)
    assert not x.is_zero()
    out = x.to_string(scientific=True)
    assert Real50(out) == x


def test_huge_long_significand_renders_scientific():
    x = Real50("123456789012345678901234e1000000000")
    out = x.to_string()
    assert out.startswith("1.23456789012345678901") and "e" in out
    assert Real50(out) == x
    assert x.sign() == 1 and x > 0
    assert x.to_double() == float("inf")


def test_tiny_value_keeps_sign():
    x = Real50("-1e-2000000000")
    assert x.sign() == -1
    assert x < 0 and x.compare(0) == -1
    assert x.to_double() == 0.0


# -----------------------------
# Truncating extraction / short digit requests
# -----------------------------

@pytest.mark.parametrize("source,expected", [(2.75, 2), (-2.75, -2), (2.5, 2), (-0.5, 0), (0.99, 0)])
def test_integer_extraction_truncates(source, expected):
    print(f"[real-truncate] {source} -> {expected}")
    x = Real50(source)
    assert int(x) == expected
    assert x.to_signed() == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        (3, "3"),
        (1.46, "1"),
        (-96, "-100"),
        (0.3, "3.e-1"),
    ],
)
def test_single_digit_request(source, expected):
    assert Real50(source).to_string(1) == expected


def test_non_finite_float_comparison_follows_float():
    x = Real50(1)
    nan, inf = float("nan"), float("inf")
    assert not (x == nan)
    assert x != nan
    assert not (x < nan) and not (x >= nan)
    assert x < inf and x > -inf and x != inf
    with pytest.raises(NonFiniteInputError):
        x.compare(nan)
