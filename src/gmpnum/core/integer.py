"""
IntegerValue: arbitrary-precision signed integer backed by gmpy2.mpz.

- Unbounded magnitude; no precision attribute.
- Division and modulus follow the floor convention: the quotient rounds toward
  negative infinity and the remainder takes the divisor's sign (or is zero),
  so that dividend == divisor * quotient + remainder always holds.
- Right shift is floor-style (arithmetic shift toward negative infinity).
- Shift amounts are native unsigned values.

Operands are IntegerValue or plain ints. In-place operators rebind the handle of
the left operand; binary operators allocate a new IntegerValue.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Tuple

import gmpy2
from gmpy2 import mpz

from .float_conv import ChunkOps, convert_float
from .native import (
    NativeKind,
    NativeValue,
    as_native,
    check_native_range,
    is_native_int,
    resolve_kind,
)

logger = logging.getLogger(__name__)

# Debug printing control
DEBUG_INTEGER = False

def _dbg(msg: str) -> None:
    if DEBUG_INTEGER:
        logger.debug(msg)


# ----------------------------
# Engine helpers
# ----------------------------

def floor_mod(dividend, divisor):
    """Floor-convention remainder built on the engine's truncating modulus.

    The truncating remainder carries the dividend's sign. When it is non-zero
    and its sign differs from the divisor's, adding the divisor moves it into
    the divisor's sign class without changing it modulo the divisor.

        dividend  divisor  trunc  floor
           7         3       1      1
          -7         3      -1      2
           7        -3       1     -2
          -7        -3      -1     -1
    """
    r = gmpy2.t_mod(dividend, divisor)
    if r != 0 and (r < 0) != (divisor < 0):
        r += divisor
    _dbg(f"floor_mod: {dividend} mod {divisor} -> {r}")
    return r


def floor_div(dividend, divisor):
    """Quotient paired with floor_mod."""
    return gmpy2.f_div(dividend, divisor)


def _shift_amount(n: Any) -> int:
    if not is_native_int(n):
        raise TypeError(f"shift amount must be int, got {type(n).__name__}")
    return check_native_range(NativeKind.UNSIGNED, n)


def _scale_2exp(x, e: int):
    if e > 0:
        return x << e
    # truncates toward zero, so float and extended intake agree (-2.5 -> -2)
    return gmpy2.t_div_2exp(x, -e)


_INTEGER_CHUNK_OPS = ChunkOps(
    from_int=mpz,
    shift_left=operator.lshift,
    add=operator.add,
    sub=operator.sub,
    scale_2exp=_scale_2exp,
)


# ----------------------------
# IntegerValue
# ----------------------------

class IntegerValue:
    """Arbitrary-precision signed integer.

    IntegerValue(source=None): `source` may be another IntegerValue or any native
    source. Floats are truncated toward zero; strings are parsed as base 10.
    """

    __hash__ = None  # mutable

    def __init__(self, source: Any = None) -> None:
        self._data = mpz(0)
        if source is not None:
            self.assign(source)

    # ------------- assignment -------------

    def assign(self, source: Any) -> "IntegerValue":
        if isinstance(source, IntegerValue):
            self._data = source._data
            return self
        self._data = self._from_native(as_native(source))
        return self

    @staticmethod
    def _from_native(nv: NativeValue):
        k = nv.kind
        if k in (NativeKind.UNSIGNED, NativeKind.SIGNED):
            return mpz(nv.value)
        if k is NativeKind.DOUBLE:
            return mpz(nv.require_finite())
        if k is NativeKind.EXTENDED:
            return convert_float(nv.require_finite(), _INTEGER_CHUNK_OPS)
        return mpz(nv.value, 10)

    def copy(self) -> "IntegerValue":
        return IntegerValue(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "IntegerValue":
        return self.copy()

    def swap(self, other: "IntegerValue") -> None:
        if not isinstance(other, IntegerValue):
            raise TypeError(f"cannot swap IntegerValue with {type(other).__name__}")
        self._data, other._data = other._data, self._data

    @classmethod
    def _wrap(cls, data) -> "IntegerValue":
        out = cls()
        out._data = data
        return out

    # ------------- predicates / queries -------------

    def is_zero(self) -> bool:
        return self._data == 0

    def sign(self) -> int:
        return int(gmpy2.sign(self._data))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- comparisons -------------

    @staticmethod
    def _operand(other: Any):
        if isinstance(other, IntegerValue):
            return other._data
        if is_native_int(other):
            return other
        return None

    def compare(self, other: Any) -> int:
        o = self._operand(other)
        if o is None:
            raise TypeError(f"cannot compare IntegerValue with {type(other).__name__}")
        a = self._data
        return (a > o) - (a < o)

    def _rich(self, other: Any, test: Callable[[int], bool]):
        o = self._operand(other)
        if o is None:
            return NotImplemented
        a = self._data
        return test((a > o) - (a < o))

    def __eq__(self, other: object) -> bool:
        return self._rich(other, lambda c: c == 0)

    def __ne__(self, other: object) -> bool:
        return self._rich(other, lambda c: c != 0)

    def __lt__(self, other: Any) -> bool:
        return self._rich(other, lambda c: c < 0)

    def __le__(self, other: Any) -> bool:
        return self._rich(other, lambda c: c <= 0)

    def __gt__(self, other: Any) -> bool:
        return self._rich(other, lambda c: c > 0)

    def __ge__(self, other: Any) -> bool:
        return self._rich(other, lambda c: c >= 0)

    # ------------- arithmetic -------------

    def _inplace(self, other: Any, fn: Callable):
        o = self._operand(other)
        if o is None:
            return NotImplemented
        self._data = fn(self._data, o)
        return self

    def _binary(self, other: Any, fn: Callable, reflected: bool = False):
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if reflected:
            return IntegerValue._wrap(fn(mpz(o), self._data))
        return IntegerValue._wrap(fn(self._data, o))

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __ifloordiv__(self, other):
        return self._inplace(other, floor_div)

    __itruediv__ = __ifloordiv__

    def __imod__(self, other):
        return self._inplace(other, floor_mod)

    def __iand__(self, other):
        return self._inplace(other, operator.and_)

    def __ior__(self, other):
        return self._inplace(other, operator.or_)

    def __ixor__(self, other):
        return self._inplace(other, operator.xor)

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __floordiv__(self, other):
        return self._binary(other, floor_div)

    __truediv__ = __floordiv__

    def __mod__(self, other):
        return self._binary(other, floor_mod)

    def __divmod__(self, other):
        q = self.__floordiv__(other)
        if q is NotImplemented:
            return q
        return q, self.__mod__(other)

    def __and__(self, other):
        return self._binary(other, operator.and_)

    def __or__(self, other):
        return self._binary(other, operator.or_)

    def __xor__(self, other):
        return self._binary(other, operator.xor)

    def __radd__(self, other):
        return self._binary(other, operator.add, reflected=True)

    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflected=True)

    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflected=True)

    def __rfloordiv__(self, other):
        return self._binary(other, floor_div, reflected=True)

    __rtruediv__ = __rfloordiv__

    def __rmod__(self, other):
        return self._binary(other, floor_mod, reflected=True)

    def __rdivmod__(self, other):
        q = self.__rfloordiv__(other)
        if q is NotImplemented:
            return q
        return q, self.__rmod__(other)

    def __rand__(self, other):
        return self._binary(other, operator.and_, reflected=True)

    def __ror__(self, other):
        return self._binary(other, operator.or_, reflected=True)

    def __rxor__(self, other):
        return self._binary(other, operator.xor, reflected=True)

    # ------------- shifts -------------

    def __ilshift__(self, n):
        self._data = self._data << _shift_amount(n)
        return self

    def __irshift__(self, n):
        self._data = gmpy2.f_div_2exp(self._data, _shift_amount(n))
        return self

    def __lshift__(self, n):
        return IntegerValue._wrap(self._data << _shift_amount(n))

    def __rshift__(self, n):
        return IntegerValue._wrap(gmpy2.f_div_2exp(self._data, _shift_amount(n)))

    # ------------- unary -------------

    def negate(self) -> "IntegerValue":
        self._data = -self._data
        return self

    def __neg__(self) -> "IntegerValue":
        return IntegerValue._wrap(-self._data)

    def __pos__(self) -> "IntegerValue":
        return self.copy()

    def __abs__(self) -> "IntegerValue":
        return IntegerValue._wrap(abs(self._data))

    def __invert__(self) -> "IntegerValue":
        return IntegerValue._wrap(~self._data)

    # ------------- conversions -------------

    def to_string(self, digits: int = 0, scientific: bool = False) -> str:
        """Base-10 text; `digits` and `scientific` are accepted and ignored."""
        return str(self._data)

    def to_double(self) -> float:
        return float(self._data)

    def to_signed(self) -> int:
        return check_native_range(NativeKind.SIGNED, int(self._data))

    def to_unsigned(self) -> int:
        return check_native_range(NativeKind.UNSIGNED, int(self._data))

    def convert_to(self, target: Any):
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
        return int(self._data)

    def __index__(self) -> int:
        return int(self._data)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"IntegerValue({self.to_string()})"


__all__ = [
    "floor_mod",
    "floor_div",
    "IntegerValue",
]
