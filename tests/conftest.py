from __future__ import annotations

import pytest

from gmpnum import DEFAULT_CONFIG, Real50, RealValue, IntegerValue, RationalValue
from gmpnum.core.constants import DEFAULT_PRECISION_DIGITS10


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(autouse=True)
def restore_default_precision():
    """Every test starts (and ends) with the stock default precision."""
    DEFAULT_CONFIG.set(DEFAULT_PRECISION_DIGITS10)
    yield
    DEFAULT_CONFIG.set(DEFAULT_PRECISION_DIGITS10)


@pytest.fixture()
def third_20() -> RealValue:
    """1/3 held at 20 decimal digits (dynamic precision)."""
    x = RealValue(1, 20)
    x /= 3
    return x


@pytest.fixture()
def seven() -> IntegerValue:
    return IntegerValue(7)


@pytest.fixture()
def one_third() -> RationalValue:
    return RationalValue.from_fraction(1, 3)


@pytest.fixture()
def one_and_half() -> Real50:
    return Real50(1.5)
