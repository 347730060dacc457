"""
gmpnum Core
===========

Unified exports for the arbitrary-precision value primitives.
All raw arithmetic is delegated to gmpy2 (mpfr / mpz / mpq); this package adds
precision management, exact native-float conversion, canonical decimal
rendering and floor-style integer modulus on top.
"""

# NOTE:
#   Each value type owns exactly one engine handle and never references another
#   value type. The only process-wide state is the default precision held by
#   DEFAULT_CONFIG (read at construction time by dynamic reals).

# Native widths and engine bounds
from .constants import (
    ULONG_MAX,
    LONG_MAX,
    LONG_MIN,
    FLOAT_CHUNK_BITS,
    DEFAULT_PRECISION_DIGITS10,
)

# Precision policy and shared configuration
from .precision import (
    bits_for,
    digits10_for,
    PrecisionConfig,
    DEFAULT_CONFIG,
    get_default_precision,
    set_default_precision,
)

# Native source kinds
from .native import (
    NativeKind,
    NativeValue,
    unsigned,
    signed,
    double,
    extended,
    text,
    as_native,
)

# Conversion and formatting helpers
from .float_conv import ChunkOps, convert_float
from .fmt import format_digits, format_fraction

# Value types
from .real import RealValue, fixed_real, Real50, Real100, Real500, Real1000
from .integer import IntegerValue, floor_mod, floor_div
from .rational import RationalValue

# Core exceptions
from .exc import PrecisionError, NativeRangeError, NonFiniteInputError

__all__ = [
    # constants
    "ULONG_MAX",
    "LONG_MAX",
    "LONG_MIN",
    "FLOAT_CHUNK_BITS",
    "DEFAULT_PRECISION_DIGITS10",
    # precision
    "bits_for",
    "digits10_for",
    "PrecisionConfig",
    "DEFAULT_CONFIG",
    "get_default_precision",
    "set_default_precision",
    # native kinds
    "NativeKind",
    "NativeValue",
    "unsigned",
    "signed",
    "double",
    "extended",
    "text",
    "as_native",
    # conversion / formatting
    "ChunkOps",
    "convert_float",
    "format_digits",
    "format_fraction",
    # value types
    "RealValue",
    "fixed_real",
    "Real50",
    "Real100",
    "Real500",
    "Real1000",
    "IntegerValue",
    "floor_mod",
    "floor_div",
    "RationalValue",
    # exceptions
    "PrecisionError",
    "NativeRangeError",
    "NonFiniteInputError",
]
