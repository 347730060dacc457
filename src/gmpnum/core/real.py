"""
RealValue: arbitrary-precision binary floating value backed by gmpy2.mpfr.

- Two flavors share this class. RealValue itself is dynamic: precision is an
  instance property, defaulting to the shared PrecisionConfig. fixed_real(d)
  returns a subclass whose precision is baked into the type (DIGITS10 = d).
- Precision is requested in decimal digits; the engine precision in bits is
  always derived from it (precision.bits_for), never stored independently.
- Every engine call runs inside a context carrying the destination's bits and
  the engine's widest exponent range, so results are rounded to the
  destination, never to an operand.
- Copy-construction allocates at the destination's own precision first and
  copies the value in afterwards; it never inherits a narrower source precision.

Arithmetic accepts operands of the same type or plain ints. In-place operators
rebind the left operand's handle; binary operators allocate a result of the
left operand's type and precision (the right operand's for reflected forms).
"""

from __future__ import annotations

import logging
import operator
import threading
from typing import Any, Callable, Dict, Optional, Tuple

import gmpy2
from gmpy2 import mpfr

from .constants import ENGINE_EMAX, ENGINE_EMIN
from .exc import PrecisionError
from .float_conv import ChunkOps, convert_float
from .fmt import format_digits, strip_digits
from .native import (
    NativeKind,
    NativeValue,
    as_native,
    check_native_range,
    is_native_int,
    nonfinite_rich,
    resolve_kind,
)
from .precision import DEFAULT_CONFIG, PrecisionConfig, bits_for, check_digits10

logger = logging.getLogger(__name__)

# Debug printing control
DEBUG_REAL = False

def _dbg(msg: str) -> None:
    if DEBUG_REAL:
        logger.debug(msg)


# ----------------------------
# Engine helpers
# ----------------------------

def real_context(bits: int):
    """gmpy2 context for an operation whose destination holds `bits` bits."""
    return gmpy2.context(
        precision=bits,
        emin=ENGINE_EMIN,
        emax=ENGINE_EMAX,
        trap_divzero=True,
        trap_invalid=True,
    )


def _scale_2exp(x, e: int):
    if e > 0:
        return gmpy2.mul_2exp(x, e)
    return gmpy2.div_2exp(x, -e)


# Must be applied inside real_context(): intermediate results take its precision.
_REAL_CHUNK_OPS = ChunkOps(
    from_int=mpfr,
    shift_left=gmpy2.mul_2exp,
    add=operator.add,
    sub=operator.sub,
    scale_2exp=_scale_2exp,
)


# ----------------------------
# RealValue
# ----------------------------

class RealValue:
    """Arbitrary-precision real with dynamic (per-instance) precision.

    RealValue(source=None, digits10=None, config=None)

    `source` may be another RealValue (copied at *this* value's precision) or
    any native source (int, float, str, NativeValue). Without `digits10`, a
    dynamic value takes `config.default_digits10` (DEFAULT_CONFIG by default).
    """

    #: 0 marks the dynamic flavor; fixed_real(d) subclasses set it to d.
    DIGITS10: int = 0

    __hash__ = None  # mutable

    def __init__(
        self,
        source: Any = None,
        digits10: Optional[int] = None,
        *,
        config: Optional[PrecisionConfig] = None,
    ) -> None:
        fixed = type(self).DIGITS10
        if fixed:
            if digits10 is not None and digits10 != fixed:
                raise PrecisionError(
                    f"{type(self).__name__} has fixed precision {fixed}, got request for {digits10}"
                )
            self._digits10 = fixed
        elif digits10 is not None:
            self._digits10 = check_digits10(digits10)
        else:
            self._digits10 = (config or DEFAULT_CONFIG).get()

        with self._context():
            self._data = mpfr(0)
        if source is not None:
            self.assign(source)

    # ------------- precision -------------

    @classmethod
    def is_fixed(cls) -> bool:
        return cls.DIGITS10 != 0

    @classmethod
    def default_precision(cls) -> int:
        return DEFAULT_CONFIG.get()

    @classmethod
    def set_default_precision(cls, digits10: int) -> None:
        DEFAULT_CONFIG.set(digits10)

    @property
    def precision(self) -> int:
        """Precision in decimal digits."""
        return self._digits10

    @precision.setter
    def precision(self, digits10: int) -> None:
        if self.is_fixed():
            raise PrecisionError(f"{type(self).__name__} has fixed precision {self.DIGITS10}")
        self._digits10 = check_digits10(digits10)
        with self._context():
            self._data = mpfr(self._data, self.bits)
        _dbg(f"precision: reallocated at digits10={digits10}, bits={self.bits}")

    @property
    def bits(self) -> int:
        """Engine precision in bits, derived from the digit request."""
        return bits_for(self._digits10)

    def _context(self):
        return real_context(self.bits)

    # ------------- assignment -------------

    def assign(self, source: Any) -> "RealValue":
        """Set the value from another RealValue or a native source; precision is kept."""
        if isinstance(source, RealValue):
            with self._context():
                self._data = mpfr(source._data, self.bits)
            return self
        nv = as_native(source)
        with self._context():
            self._data = self._from_native(nv)
        return self

    def _from_native(self, nv: NativeValue):
        k = nv.kind
        if k in (NativeKind.UNSIGNED, NativeKind.SIGNED):
            return mpfr(nv.value, self.bits)
        if k is NativeKind.DOUBLE:
            return mpfr(nv.require_finite(), self.bits)
        if k is NativeKind.EXTENDED:
            return mpfr(convert_float(nv.require_finite(), _REAL_CHUNK_OPS), self.bits)
        return mpfr(nv.value, self.bits)

    def copy(self) -> "RealValue":
        """Independent copy with the same type and precision."""
        if self.is_fixed():
            return type(self)(self)
        return type(self)(self, self._digits10)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "RealValue":
        return self.copy()

    def swap(self, other: "RealValue") -> None:
        """Exchange handles (and precision) with a value of the same type."""
        if type(other) is not type(self):
            raise TypeError(f"cannot swap {type(self).__name__} with {type(other).__name__}")
        self._data, other._data = other._data, self._data
        self._digits10, other._digits10 = other._digits10, self._digits10

    def _like(self) -> "RealValue":
        if self.is_fixed():
            return type(self)()
        return type(self)(digits10=self._digits10)

    # ------------- predicates / queries -------------

    def is_zero(self) -> bool:
        with self._context():
            return gmpy2.is_zero(self._data)

    def sign(self) -> int:
        with self._context():
            return int(gmpy2.sign(self._data))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- comparisons -------------

    def _compare_operand(self, other: Any):
        if type(other) is type(self):
            return other._data
        if is_native_int(other):
            return other
        if isinstance(other, (float, str, NativeValue)):
            return type(self)(other, None if self.is_fixed() else self._digits10)._data
        return None

    def compare(self, other: Any) -> int:
        """Tri-state ordering against a value of the same type or a native source.

        An infinite or NaN float operand raises NonFiniteInputError here; the
        rich comparison operators order it the way float does instead.
        """
        o = self._compare_operand(other)
        if o is None:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        with self._context():
            a = self._data
            return (a > o) - (a < o)

    def _rich(self, other: Any, op: Callable[[int, int], bool]):
        special = nonfinite_rich(other, op)
        if special is not None:
            return special
        o = self._compare_operand(other)
        if o is None:
            return NotImplemented
        with self._context():
            a = self._data
            return op((a > o) - (a < o), 0)

    def __eq__(self, other: object) -> bool:
        return self._rich(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._rich(other, operator.ne)

    def __lt__(self, other: Any) -> bool:
        return self._rich(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._rich(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._rich(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._rich(other, operator.ge)

    # ------------- arithmetic -------------

    def _operand(self, other: Any):
        if type(other) is type(self):
            return other._data
        if is_native_int(other):
            return other
        return None

    def _inplace(self, other: Any, fn: Callable):
        o = self._operand(other)
        if o is None:
            return NotImplemented
        with self._context():
            self._data = fn(self._data, o)
        return self

    def _binary(self, other: Any, fn: Callable, reflected: bool = False):
        o = self._operand(other)
        if o is None:
            return NotImplemented
        result = self._like()
        with result._context():
            result._data = fn(o, self._data) if reflected else fn(self._data, o)
        return result

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other):
        return self._inplace(other, operator.truediv)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __radd__(self, other):
        return self._binary(other, operator.add, reflected=True)

    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflected=True)

    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflected=True)

    def __rtruediv__(self, other):
        return self._binary(other, operator.truediv, reflected=True)

    def negate(self) -> "RealValue":
        """Flip the sign in place."""
        with self._context():
            self._data = -self._data
        return self

    def __neg__(self) -> "RealValue":
        return self.copy().negate()

    def __pos__(self) -> "RealValue":
        return self.copy()

    # ------------- functions -------------

    def _unary(self, fn: Callable) -> "RealValue":
        result = self._like()
        with result._context():
            result._data = fn(self._data)
        return result

    def __abs__(self) -> "RealValue":
        return self._unary(abs)

    def sqrt(self) -> "RealValue":
        return self._unary(gmpy2.sqrt)

    def floor(self) -> "RealValue":
        return self._unary(gmpy2.floor)

    def ceil(self) -> "RealValue":
        return self._unary(gmpy2.ceil)

    def trunc(self) -> "RealValue":
        return self._unary(gmpy2.trunc)

    def ldexp(self, e: int) -> "RealValue":
        """self * 2**e, exact apart from rounding to this precision."""
        if e == 0:
            return self.copy()
        return self._unary(lambda x: _scale_2exp(x, e))

    def frexp(self) -> Tuple["RealValue", int]:
        """(m, e) with self == m * 2**e and 0.5 <= |m| < 1 (m == 0 for zero)."""
        if self.is_zero():
            return self._like(), 0
        with self._context():
            e, _ = gmpy2.frexp(self._data)
        return self.ldexp(-e), int(e)

    # ------------- conversions -------------

    def _engine_digits(self, digits: int) -> Tuple[str, int]:
        # MPFR refuses a one-digit request; printf-style formatting rounds to it
        if digits == 1:
            mantissa, _, exponent = format(self._data, ".0e").partition("e")
            return mantissa, int(exponent) + 1
        ps, e, _ = self._data.digits(10, digits)
        return ps, e

    def to_string(self, digits: int = 0, scientific: bool = False) -> str:
        """Decimal text; `digits` == 0 lets the engine choose enough digits."""
        with self._context():
            if gmpy2.is_zero(self._data):
                return "0"
            ps, e = self._engine_digits(digits)
        _dbg(f"to_string: digits={ps!r}, e={e}, scientific={scientific}")
        return format_digits(strip_digits(ps), e, scientific)

    def to_double(self) -> float:
        with self._context():
            return float(self._data)

    def _to_native_int(self, kind: NativeKind) -> int:
        # truncate toward zero, range-check before leaving the engine
        with self._context():
            t = gmpy2.trunc(self._data)
            check_native_range(kind, t)
            return int(t)

    def to_signed(self) -> int:
        return self._to_native_int(NativeKind.SIGNED)

    def to_unsigned(self) -> int:
        return self._to_native_int(NativeKind.UNSIGNED)

    def convert_to(self, target: Any):
        """Extract as a native kind (NativeKind member, or float / int / str)."""
        kind = resolve_kind(target)
        if kind in (NativeKind.DOUBLE, NativeKind.EXTENDED):
            return self.to_double()
        if kind is NativeKind.SIGNED:
            return self.to_signed()
        if kind is NativeKind.UNSIGNED:
            return self.to_unsigned()
        return self.to_string()

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        with self._context():
            return int(gmpy2.trunc(self._data))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.is_fixed():
            return f"{type(self).__name__}('{self.to_string()}')"
        return f"{type(self).__name__}('{self.to_string()}', digits10={self._digits10})"


# ----------------------------
# Fixed-precision types
# ----------------------------

_FIXED_TYPES: Dict[int, type] = {}
_FIXED_LOCK = threading.Lock()


def fixed_real(digits10: int) -> type:
    """Return the RealValue subclass with precision fixed at `digits10` digits.

    Types are cached: fixed_real(50) is fixed_real(50).
    """
    check_digits10(digits10)
    with _FIXED_LOCK:
        cls = _FIXED_TYPES.get(digits10)
        if cls is None:
            cls = type(
                f"Real{digits10}",
                (RealValue,),
                {
                    "DIGITS10": digits10,
                    "__module__": __name__,
                    "__doc__": f"RealValue with precision fixed at {digits10} decimal digits.",
                },
            )
            _FIXED_TYPES[digits10] = cls
            _dbg(f"fixed_real: created {cls.__name__} (bits={bits_for(digits10)})")
    return cls


Real50 = fixed_real(50)
Real100 = fixed_real(100)
Real500 = fixed_real(500)
Real1000 = fixed_real(1000)


__all__ = [
    "real_context",
    "RealValue",
    "fixed_real",
    "Real50",
    "Real100",
    "Real500",
    "Real1000",
]
