"""
RationalValue: exact fraction backed by gmpy2.mpq.

The engine keeps numerator/denominator in lowest terms with the sign on the
numerator. No shifts, bitwise operations or precision. Integer extraction goes
through a double and truncates (precision loss is accepted there).
"""

from __future__ import annotations

import operator
from typing import Any, Callable

import gmpy2
from gmpy2 import mpq, mpz

from .float_conv import ChunkOps, convert_float
from .fmt import format_fraction
from .native import (
    NativeKind,
    NativeValue,
    as_native,
    check_native_range,
    is_native_int,
    nonfinite_rich,
    resolve_kind,
)


def _pow2(n: int):
    return mpz(1) << n


def _scale_2exp(x, e: int):
    if e > 0:
        return x * _pow2(e)
    return x / _pow2(-e)


# Chunks are accumulated by rational addition.
_RATIONAL_CHUNK_OPS = ChunkOps(
    from_int=mpq,
    shift_left=lambda x, n: x * _pow2(n),
    add=lambda x, t: x + mpq(t),
    sub=lambda x, t: x - mpq(t),
    scale_2exp=_scale_2exp,
)


class RationalValue:
    """Arbitrary-precision exact fraction.

    RationalValue(source=None): `source` may be another RationalValue or any
    native source. Doubles are taken exactly; strings use the engine's 'n/d'
    (or decimal) syntax.
    """

    __hash__ = None  # mutable

    def __init__(self, source: Any = None) -> None:
        self._data = mpq(0)
        if source is not None:
            self.assign(source)

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> "RationalValue":
        """Build numerator/denominator; reduced by the engine."""
        out = cls()
        out._data = mpq(numerator, denominator)
        return out

    # ------------- assignment -------------

    def assign(self, source: Any) -> "RationalValue":
        if isinstance(source, RationalValue):
            self._data = source._data
            return self
        self._data = self._from_native(as_native(source))
        return self

    @staticmethod
    def _from_native(nv: NativeValue):
        k = nv.kind
        if k in (NativeKind.UNSIGNED, NativeKind.SIGNED):
            return mpq(nv.value)
        if k is NativeKind.DOUBLE:
            return mpq(nv.require_finite())
        if k is NativeKind.EXTENDED:
            return convert_float(nv.require_finite(), _RATIONAL_CHUNK_OPS)
        return mpq(nv.value)

    def copy(self) -> "RationalValue":
        return RationalValue(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "RationalValue":
        return self.copy()

    def swap(self, other: "RationalValue") -> None:
        if not isinstance(other, RationalValue):
            raise TypeError(f"cannot swap RationalValue with {type(other).__name__}")
        self._data, other._data = other._data, self._data

    @classmethod
    def _wrap(cls, data) -> "RationalValue":
        out = cls()
        out._data = data
        return out

    # ------------- parts / queries -------------

    @property
    def numerator(self) -> int:
        return int(self._data.numerator)

    @property
    def denominator(self) -> int:
        return int(self._data.denominator)

    def is_zero(self) -> bool:
        return self._data == 0

    def sign(self) -> int:
        return int(gmpy2.sign(self._data))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------- comparisons -------------

    @staticmethod
    def _operand(other: Any):
        if isinstance(other, RationalValue):
            return other._data
        if is_native_int(other):
            return other
        return None

    def _compare_operand(self, other: Any):
        if isinstance(other, (float, str, NativeValue)):
            return RationalValue(other)._data
        return self._operand(other)

    def compare(self, other: Any) -> int:
        """Tri-state ordering; an infinite or NaN float raises NonFiniteInputError."""
        o = self._compare_operand(other)
        if o is None:
            raise TypeError(f"cannot compare RationalValue with {type(other).__name__}")
        a = self._data
        return (a > o) - (a < o)

    def _rich(self, other: Any, op: Callable[[int, int], bool]):
        special = nonfinite_rich(other, op)
        if special is not None:
            return special
        o = self._compare_operand(other)
        if o is None:
            return NotImplemented
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
            return RationalValue._wrap(fn(mpq(o), self._data))
        return RationalValue._wrap(fn(self._data, o))

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

    def negate(self) -> "RationalValue":
        self._data = -self._data
        return self

    def __neg__(self) -> "RationalValue":
        return RationalValue._wrap(-self._data)

    def __pos__(self) -> "RationalValue":
        return self.copy()

    def __abs__(self) -> "RationalValue":
        return RationalValue._wrap(abs(self._data))

    # ------------- conversions -------------

    def to_string(self, digits: int = 0, scientific: bool = False) -> str:
        """'n/d' (or 'n'); `digits` and `scientific` are accepted and ignored."""
        return format_fraction(self.numerator, self.denominator)

    def to_double(self) -> float:
        return float(self._data)

    def to_signed(self) -> int:
        # via double, truncating
        return check_native_range(NativeKind.SIGNED, int(self.to_double()))

    def to_unsigned(self) -> int:
        return check_native_range(NativeKind.UNSIGNED, int(self.to_double()))

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
        return int(self.to_double())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"RationalValue('{self.to_string()}')"


__all__ = [
    "RationalValue",
]
