"""
Bit-exact native float -> arbitrary-precision conversion.

The float is split into a normalised fraction and a binary exponent
(math.frexp). Each step shifts the fraction left by FLOAT_CHUNK_BITS, peels off
its integral part, shifts the accumulator by the same amount and adds (or
subtracts) the chunk. The loop ends once the fraction is exactly zero, which
always happens for a finite float. The accumulator is then scaled by the
remaining binary exponent.

No decimal rounding happens anywhere: the result is the float's exact binary
value (up to the destination's own precision for reals).

The destination supplies its primitives through ChunkOps, so the same loop
serves reals (shift/scale by powers of two), integers (the final right shift
truncates) and rationals (chunks accumulated by rational addition).
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, NamedTuple

from .constants import FLOAT_CHUNK_BITS
from .exc import NonFiniteInputError

logger = logging.getLogger(__name__)

# Debug printing control
DEBUG_CONV = False

def _dbg(msg: str) -> None:
    if DEBUG_CONV:
        logger.debug(msg)


class ChunkOps(NamedTuple):
    """Engine primitives the conversion loop needs from its destination."""
    from_int: Callable[[int], Any]
    shift_left: Callable[[Any, int], Any]
    add: Callable[[Any, int], Any]
    sub: Callable[[Any, int], Any]
    scale_2exp: Callable[[Any, int], Any]


def convert_float(a: float, ops: ChunkOps) -> Any:
    """Return the engine handle holding the exact value of `a`.

    Raises NonFiniteInputError for inf/NaN.
    """
    if a == 0:
        return ops.from_int(0)
    if a == 1:
        return ops.from_int(1)
    if math.isinf(a) or math.isnan(a):
        raise NonFiniteInputError(f"cannot convert non-finite float {a!r}")

    f, e = math.frexp(a)
    acc = ops.from_int(0)
    _dbg(f"convert_float: start a={a!r}, f={f!r}, e={e}")

    while f:
        # extract chunk-sized bits from f
        f = math.ldexp(f, FLOAT_CHUNK_BITS)
        term = math.floor(f)
        e -= FLOAT_CHUNK_BITS
        acc = ops.shift_left(acc, FLOAT_CHUNK_BITS)
        if term > 0:
            acc = ops.add(acc, term)
        else:
            acc = ops.sub(acc, -term)
        f -= term
        _dbg(f"convert_float: term={term}, e={e}, f={f!r}")

    if e != 0:
        acc = ops.scale_2exp(acc, e)
    return acc


__all__ = [
    "ChunkOps",
    "convert_float",
]
