"""
gmpnum Core Constants
=====================

Native-type widths and engine-derived bounds shared by the value types.
Nothing here depends on a value type; the numbers only describe the native
kinds we accept/extract and the exponent range the engine can represent.
"""

# NOTE: Native ranges mirror a 64-bit `unsigned long` / `long`. Python ints are
#       unbounded, so these only matter at the native boundary.

import gmpy2

# ---------------------------------------------------------------------------
# Native integer kinds
# ---------------------------------------------------------------------------

#: Width of the native unsigned/signed integer kinds, in bits.
NATIVE_LONG_BITS: int = 64

ULONG_MAX: int = (1 << NATIVE_LONG_BITS) - 1
LONG_MAX: int = (1 << (NATIVE_LONG_BITS - 1)) - 1
LONG_MIN: int = -(1 << (NATIVE_LONG_BITS - 1))

#: Decimal digits a native unsigned value can always hold (digits10 of uintmax).
ULONG_DIGITS10: int = 19

#: Bits consumed per step of the chunked float conversion
#: (value bits of a 32-bit signed int, minus one).
FLOAT_CHUNK_BITS: int = 30


# ---------------------------------------------------------------------------
# Precision policy
# ---------------------------------------------------------------------------

#: Process-wide default precision for dynamic reals, in decimal digits.
DEFAULT_PRECISION_DIGITS10: int = 50

#: Rational approximation of log2(10) used by the digits <-> bits mapping.
LOG2_10_NUM: int = 1000
LOG2_10_DEN: int = 301


# ---------------------------------------------------------------------------
# Engine exponent range (binary)
# ---------------------------------------------------------------------------

#: Widest exponent range MPFR supports; every real context is opened with it.
ENGINE_EMIN: int = gmpy2.get_emin_min()
ENGINE_EMAX: int = gmpy2.get_emax_max()

#: Shift applied to 1 to reach the smallest / largest representable real.
#: 1 is stored as 0.5 * 2**1: the minimum lands one step above emin, the
#: maximum exactly on emax.
MIN_SHIFT: int = -ENGINE_EMIN
MAX_SHIFT: int = ENGINE_EMAX - 1


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "NATIVE_LONG_BITS",
    "ULONG_MAX",
    "LONG_MAX",
    "LONG_MIN",
    "ULONG_DIGITS10",
    "FLOAT_CHUNK_BITS",
    "DEFAULT_PRECISION_DIGITS10",
    "LOG2_10_NUM",
    "LOG2_10_DEN",
    "ENGINE_EMIN",
    "ENGINE_EMAX",
    "MIN_SHIFT",
    "MAX_SHIFT",
]
