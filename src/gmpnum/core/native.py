"""
Native source kinds accepted by every value type.

A single tagged value (NativeValue) replaces a family of per-type assignment
overloads: value types dispatch once on `kind`.

- UNSIGNED / SIGNED: Python ints restricted to the 64-bit native ranges.
- DOUBLE: a Python float, handed to the engine's direct setter.
- EXTENDED: a Python float routed through the chunked, bit-exact conversion
  (float_conv). Python's widest native float is the IEEE double.
- STRING: decimal text parsed by the engine; parse errors are the engine's.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from .constants import LONG_MAX, LONG_MIN, ULONG_MAX
from .exc import NativeRangeError, NonFiniteInputError


class NativeKind(Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    DOUBLE = "double"
    EXTENDED = "extended"
    STRING = "string"


_FLOAT_KINDS = (NativeKind.DOUBLE, NativeKind.EXTENDED)


def check_native_range(kind: NativeKind, v: int) -> int:
    """Return `v` if it fits the native integer `kind`, else raise NativeRangeError."""
    if kind is NativeKind.UNSIGNED and not (0 <= v <= ULONG_MAX):
        raise NativeRangeError(kind, v)
    if kind is NativeKind.SIGNED and not (LONG_MIN <= v <= LONG_MAX):
        raise NativeRangeError(kind, v)
    return v


@dataclass(frozen=True)
class NativeValue:
    """A native value tagged with the kind it should be assigned as."""
    kind: NativeKind
    value: Any

    def __post_init__(self):
        k, v = self.kind, self.value
        if k in (NativeKind.UNSIGNED, NativeKind.SIGNED):
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"{k.name} native value must be int, got {type(v).__name__}")
            check_native_range(k, v)
        elif k in _FLOAT_KINDS:
            if not isinstance(v, float):
                raise TypeError(f"{k.name} native value must be float, got {type(v).__name__}")
        elif k is NativeKind.STRING:
            if not isinstance(v, str):
                raise TypeError(f"STRING native value must be str, got {type(v).__name__}")

    def require_finite(self) -> float:
        """Return the float payload, rejecting inf/NaN."""
        if math.isinf(self.value) or math.isnan(self.value):
            raise NonFiniteInputError(f"cannot assign non-finite {self.kind.name} value {self.value!r}")
        return self.value


# ----------------------------
# Constructors
# ----------------------------

def unsigned(v: int) -> NativeValue:
    return NativeValue(NativeKind.UNSIGNED, v)


def signed(v: int) -> NativeValue:
    return NativeValue(NativeKind.SIGNED, v)


def double(v: float) -> NativeValue:
    return NativeValue(NativeKind.DOUBLE, float(v))


def extended(v: float) -> NativeValue:
    return NativeValue(NativeKind.EXTENDED, float(v))


def text(s: str) -> NativeValue:
    return NativeValue(NativeKind.STRING, s)


NativeLike = Union[NativeValue, int, float, str]


def as_native(obj: NativeLike) -> NativeValue:
    """Classify a plain Python value (or pass a NativeValue through).

    ints above the signed range are taken as UNSIGNED; anything outside both
    ranges is rejected with NativeRangeError.
    """
    if isinstance(obj, NativeValue):
        return obj
    if isinstance(obj, bool):
        raise TypeError("bool is not a native numeric source")
    if isinstance(obj, int):
        if obj > LONG_MAX:
            return unsigned(obj)
        return signed(obj)
    if isinstance(obj, float):
        return double(obj)
    if isinstance(obj, str):
        return text(obj)
    raise TypeError(f"unsupported native source type: {type(obj).__name__}")


def resolve_kind(target: Any) -> NativeKind:
    """Map a convert_to target (NativeKind, float, int or str) to a NativeKind."""
    if isinstance(target, NativeKind):
        return target
    kind = _TARGET_KINDS.get(target)
    if kind is None:
        raise TypeError(f"unsupported conversion target: {target!r}")
    return kind


_TARGET_KINDS = {float: NativeKind.DOUBLE, int: NativeKind.SIGNED, str: NativeKind.STRING}


def is_native_int(obj: Any) -> bool:
    """True for plain ints usable as integer operands (bool excluded)."""
    return isinstance(obj, int) and not isinstance(obj, bool)


def nonfinite_rich(other: Any, op: Callable[[int, int], bool]) -> Optional[bool]:
    """Result of `value op other` when `other` is an infinite or NaN float, else None.

    Every finite value lies strictly between -inf and +inf; NaN is unordered
    (only != holds), matching float semantics.
    """
    if not isinstance(other, float) or math.isfinite(other):
        return None
    if math.isnan(other):
        return op is operator.ne
    return op(-1 if other > 0 else 1, 0)


__all__ = [
    "NativeKind",
    "check_native_range",
    "NativeValue",
    "NativeLike",
    "unsigned",
    "signed",
    "double",
    "extended",
    "text",
    "as_native",
    "resolve_kind",
    "is_native_int",
    "nonfinite_rich",
]
