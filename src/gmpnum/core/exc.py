"""
Core exception types for gmpnum.core.

These are dependency-free and may be imported by all core modules.
Engine errors (malformed strings, division by zero) are not wrapped here;
they propagate from gmpy2 unchanged.
"""

__all__ = [
    "PrecisionError",
    "NativeRangeError",
    "NonFiniteInputError",
]


class PrecisionError(ValueError):
    """Raised for an invalid digit count or a precision change on a fixed type."""
    pass


class NativeRangeError(ValueError):
    """Raised when a value does not fit the native integer kind it is moved to/from.

    Attributes
    ----------
    kind : Any
        The native kind involved (a NativeKind member).
    value : Any
        The offending value.
    """

    def __init__(self, kind, value):
        super().__init__(f"value {value} is outside the native {getattr(kind, 'name', kind)} range")
        self.kind = kind
        self.value = value


class NonFiniteInputError(ValueError):
    """Raised when an infinite or NaN native float is assigned to a value.

    This is a caller error: non-finite floats have no arbitrary-precision image.
    """
    pass
