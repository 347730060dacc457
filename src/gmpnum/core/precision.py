"""
Precision policy: decimal digits <-> engine bits, and the shared default.

- bits_for(d)    = (d + 1) * 1000 // 301   (ceil((d+1) * log2(10)), integer form)
- digits10_for(b) = b * 301 // 1000 - 1    (inverse of the above)

The process-wide default precision lives on a single PrecisionConfig object
(DEFAULT_CONFIG). Dynamic reals read it only at construction time; changing it
never touches existing values. Callers that need a different default can build
their own PrecisionConfig and pass it explicitly.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .constants import DEFAULT_PRECISION_DIGITS10, LOG2_10_DEN, LOG2_10_NUM
from .exc import PrecisionError


# ----------------------------
# Digits <-> bits
# ----------------------------

def check_digits10(digits10: int) -> int:
    """Validate a decimal-digit precision request and return it."""
    if isinstance(digits10, bool) or not isinstance(digits10, int):
        raise PrecisionError(f"digits10 must be an int, got {type(digits10).__name__}")
    if digits10 < 1:
        raise PrecisionError(f"digits10 must be >= 1, got {digits10}")
    return digits10


def bits_for(digits10: int) -> int:
    """Engine precision (bits) needed to hold `digits10` decimal digits."""
    return ((digits10 + 1) * LOG2_10_NUM) // LOG2_10_DEN


def digits10_for(bits: int) -> int:
    """Decimal digits guaranteed by `bits` of engine precision."""
    return (bits * LOG2_10_DEN) // LOG2_10_NUM - 1


# ----------------------------
# Shared configuration
# ----------------------------

@dataclass
class PrecisionConfig:
    """Default precision for dynamic reals built without an explicit request."""
    default_digits10: int = DEFAULT_PRECISION_DIGITS10
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self):
        check_digits10(self.default_digits10)

    def get(self) -> int:
        return self.default_digits10

    def set(self, digits10: int) -> None:
        check_digits10(digits10)
        with self._lock:
            self.default_digits10 = digits10

    def default_bits(self) -> int:
        return bits_for(self.default_digits10)


#: The shared instance read by RealValue when no config is passed.
DEFAULT_CONFIG = PrecisionConfig()


def get_default_precision() -> int:
    """Current process-wide default precision (decimal digits)."""
    return DEFAULT_CONFIG.get()


def set_default_precision(digits10: int) -> None:
    """Change the default for dynamic reals constructed from now on."""
    DEFAULT_CONFIG.set(digits10)


__all__ = [
    "check_digits10",
    "bits_for",
    "digits10_for",
    "PrecisionConfig",
    "DEFAULT_CONFIG",
    "get_default_precision",
    "set_default_precision",
]
