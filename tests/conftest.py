"""Shared test fixtures."""

from __future__ import annotations

import pytest

from finutils.math_methods.generic_functions import math_methods as fx


@pytest.fixture
def quadratic():
    """3x^2 + 5x + 2 and its derivative; roots at -1 and -2/3."""
    return fx.quadratic, fx.quadratic_prime


@pytest.fixture
def cubic_cycle():
    """x^3 - 2x + 2 and its derivative; Newton cycles between 0 and 1."""
    return fx.cubic_cycle, fx.cubic_cycle_prime


@pytest.fixture
def inverted_parabola():
    """1 - x^2 and its derivative; roots at +/-1, maximum at 0."""
    return fx.inverted_parabola, fx.inverted_parabola_prime
