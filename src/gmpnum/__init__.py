"""
Top-level API for gmpnum.

Arbitrary-precision real, integer and rational value types backed by gmpy2:
  - RealValue (dynamic precision) and fixed_real(d) / Real50 ... Real1000
  - IntegerValue (floor-style division and modulus)
  - RationalValue (exact fractions)
  - numeric_limits(): representable-range introspection
"""

from __future__ import annotations

from .core import (
    RealValue,
    fixed_real,
    Real50,
    Real100,
    Real500,
    Real1000,
    IntegerValue,
    RationalValue,
    NativeKind,
    NativeValue,
    unsigned,
    signed,
    double,
    extended,
    text,
    PrecisionConfig,
    DEFAULT_CONFIG,
    get_default_precision,
    set_default_precision,
    bits_for,
    digits10_for,
    PrecisionError,
    NativeRangeError,
    NonFiniteInputError,
)
from .limits import numeric_limits

__version__ = "0.1.0"

__all__ = [
    # value types
    "RealValue",
    "fixed_real",
    "Real50",
    "Real100",
    "Real500",
    "Real1000",
    "IntegerValue",
    "RationalValue",
    # native kinds
    "NativeKind",
    "NativeValue",
    "unsigned",
    "signed",
    "double",
    "extended",
    "text",
    # precision
    "PrecisionConfig",
    "DEFAULT_CONFIG",
    "get_default_precision",
    "set_default_precision",
    "bits_for",
    "digits10_for",
    # range introspection
    "numeric_limits",
    # exceptions
    "PrecisionError",
    "NativeRangeError",
    "NonFiniteInputError",
]
