"""
Representable-range introspection for the gmpnum value types.

numeric_limits(value_type) returns one cached limits object per type:

- fixed_real(d) types -> FixedRealLimits: bounded, radix 2, `digits` bits.
  minimum/maximum/epsilon/round_error are built from 1 by binary shifts, each
  computed once on first use (guarded by a lock) and reused afterwards.
- RealValue (dynamic precision) and RationalValue -> UnspecializedLimits:
  precision is not a property of the type, so nothing is bounded; all value
  queries return zero.
- IntegerValue -> IntegerLimits: magnitude is bounded by memory only; value
  queries return zero.

Callers always receive fresh copies; cached values are never handed out.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional

from .core.constants import ENGINE_EMAX, ENGINE_EMIN, MAX_SHIFT, MIN_SHIFT
from .core.integer import IntegerValue
from .core.precision import bits_for
from .core.rational import RationalValue
from .core.real import RealValue

logger = logging.getLogger(__name__)

# Debug printing control
DEBUG_LIMITS = False

def _dbg(msg: str) -> None:
    if DEBUG_LIMITS:
        logger.debug(msg)


ROUND_TO_NEAREST = "to_nearest"
ROUND_TOWARD_ZERO = "toward_zero"


class UnspecializedLimits:
    """Limits for a type with no fixed representable range."""

    is_specialized = False
    digits = 0
    digits10 = 0
    max_digits10 = 0
    is_signed = False
    is_integer = False
    is_exact = False
    radix = 0
    min_exponent = 0
    max_exponent = 0
    has_infinity = False
    has_quiet_nan = False
    is_bounded = False
    round_style = ROUND_TOWARD_ZERO

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type

    def _zero(self):
        return self.value_type()

    def minimum(self):
        return self._zero()

    def maximum(self):
        return self._zero()

    def lowest(self):
        return self._zero()

    def epsilon(self):
        return self._zero()

    def round_error(self):
        return self._zero()

    def infinity(self):
        return self._zero()

    def quiet_nan(self):
        return self._zero()

    def denorm_min(self):
        return self._zero()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value_type.__name__})"


class IntegerLimits(UnspecializedLimits):
    """IntegerValue: signed, exact, unbounded."""

    is_specialized = True
    is_signed = True
    is_integer = True
    is_exact = True
    radix = 2


class FixedRealLimits(UnspecializedLimits):
    """Range of a fixed-precision real type, computed lazily and cached."""

    is_specialized = True
    is_signed = True
    radix = 2
    min_exponent = ENGINE_EMIN
    max_exponent = ENGINE_EMAX
    is_bounded = True
    round_style = ROUND_TO_NEAREST

    def __init__(self, value_type: type) -> None:
        super().__init__(value_type)
        self.digits10 = value_type.DIGITS10
        self.max_digits10 = self.digits10 + 1
        self.digits = bits_for(self.digits10)
        self._cache: Dict[str, RealValue] = {}
        self._lock = threading.Lock()

    def _cached(self, name: str, build: Callable[[], RealValue]) -> RealValue:
        value = self._cache.get(name)
        if value is None:
            with self._lock:
                value = self._cache.get(name)
                if value is None:
                    value = build()
                    self._cache[name] = value
                    _dbg(f"{self.value_type.__name__}.{name}: computed")
        return value.copy()

    def _one_shifted(self, e: int) -> RealValue:
        return self.value_type(1).ldexp(e)

    def minimum(self) -> RealValue:
        return self._cached("minimum", lambda: self._one_shifted(-MIN_SHIFT))

    def maximum(self) -> RealValue:
        return self._cached("maximum", lambda: self._one_shifted(MAX_SHIFT))

    def lowest(self) -> RealValue:
        return -self.maximum()

    def epsilon(self) -> RealValue:
        return self._cached("epsilon", lambda: self._one_shifted(-(self.digits - 1)))

    def round_error(self) -> RealValue:
        """Half an epsilon."""
        return self._cached("round_error", lambda: self._one_shifted(-self.digits))

    def warm(self) -> None:
        """Compute every cached value now instead of on first use."""
        self.minimum()
        self.maximum()
        self.epsilon()
        self.round_error()


_LIMITS: Dict[type, UnspecializedLimits] = {}
_LIMITS_LOCK = threading.Lock()


def _limits_class(value_type: type) -> Optional[type]:
    if isinstance(value_type, type):
        if issubclass(value_type, RealValue):
            return FixedRealLimits if value_type.is_fixed() else UnspecializedLimits
        if issubclass(value_type, IntegerValue):
            return IntegerLimits
        if issubclass(value_type, RationalValue):
            return UnspecializedLimits
    return None


def numeric_limits(value_type: type) -> UnspecializedLimits:
    """Return the (shared) limits object for a gmpnum value type."""
    limits = _LIMITS.get(value_type)
    if limits is not None:
        return limits
    cls = _limits_class(value_type)
    if cls is None:
        raise TypeError(f"no numeric limits for {value_type!r}")
    with _LIMITS_LOCK:
        limits = _LIMITS.get(value_type)
        if limits is None:
            limits = cls(value_type)
            _LIMITS[value_type] = limits
    return limits


__all__ = [
    "ROUND_TO_NEAREST",
    "ROUND_TOWARD_ZERO",
    "UnspecializedLimits",
    "IntegerLimits",
    "FixedRealLimits",
    "numeric_limits",
]
