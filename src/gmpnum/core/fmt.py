"""
Formatting helpers: engine digit strings -> canonical decimal text.

The engine hands back a significand digit string (optionally signed) and a
decimal-point position `e`, meaning value = 0.DIGITS * 10**e. Rendering rules:

- Plain integer form when not forced scientific, the digit count fits a native
  unsigned value and the point falls at or past the last digit:
    ('15', 3)   -> '150'
- Otherwise scientific form, point after the first significant digit and an
  exponent suffix only when it is non-zero:
    ('15', 1)   -> '1.5'
    ('-15', 1)  -> '-1.5'
    ('15', 3) scientific -> '1.5e2'
    ('125', -2) -> '1.25e-3'
"""

from __future__ import annotations

from .constants import ULONG_DIGITS10


def strip_digits(ps: str) -> str:
    """Drop trailing zeros from an engine significand (sign preserved)."""
    if not ps:
        return ps
    body = ps.lstrip("-").rstrip("0")
    if not body:
        return ""
    return ("-" if ps.startswith("-") else "") + body


def format_digits(ps: str, e: int, scientific: bool = False) -> str:
    """Render significand `ps` with point position `e` (see module docstring)."""
    sl = len(ps)
    if sl == 0:
        return "0"
    negative = ps[0] == "-"
    if negative:
        sl -= 1  # number of digits excluding sign

    if not scientific and sl <= ULONG_DIGITS10 + 1 and e >= sl:
        return ps + "0" * (e - sl)

    point = 2 if negative else 1
    result = ps[:point] + "." + ps[point:]
    e -= 1
    if e:
        result += f"e{e}"
    return result


def format_fraction(numerator: int, denominator: int) -> str:
    """'n/d' for a reduced fraction, or just 'n' when d == 1."""
    if denominator == 1:
        return str(numerator)
    return f"{numerator}/{denominator}"


__all__ = [
    "strip_digits",
    "format_digits",
    "format_fraction",
]
