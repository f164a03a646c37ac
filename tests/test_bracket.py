"""Tests for finutils.math_methods.numerical_solvers.Bracket."""

from __future__ import annotations

import pytest

from finutils.math_methods.numerical_solvers.Bracket import bracket
from finutils.math_methods.numerical_solvers.Iteration import BracketNotFound, ErrorKind


class TestBracket:
    def test_expands_weaker_side_until_sign_change(self, quadratic):
        f, _ = quadratic
        res = bracket(f, -0.7)
        assert res.ok
        lower, upper = res.value
        assert lower == pytest.approx(-0.71)
        assert upper == pytest.approx(-0.658)
        assert res.iterations == 1

    def test_result_brackets_a_sign_change(self, quadratic):
        f, _ = quadratic
        lower, upper = bracket(f, -1.05).value
        assert lower < upper
        assert f(lower) * f(upper) < 0

    def test_zero_guess_uses_unit_scale(self, quadratic):
        f, _ = quadratic
        res = bracket(f, 0.0)
        assert res.ok
        lower, upper = res.value
        assert lower < upper
        assert f(lower) * f(upper) < 0

    def test_immediate_bracket_needs_no_expansion(self):
        res = bracket(lambda x: x - 100.0, 100.0)
        assert res.ok
        assert res.iterations == 0
        assert res.value == pytest.approx((99.0, 101.0))

    def test_precision_scales_first_step(self):
        lower, upper = bracket(lambda x: x - 100.0, 100.0, precision=4).value
        assert upper - lower == pytest.approx(0.02)

    def test_no_root_fails(self):
        res = bracket(lambda x: x * x + 1.0, 0.5)
        assert not res.ok
        assert res.kind is ErrorKind.BRACKET_NOT_FOUND

    def test_unwrap_raises_bracket_not_found(self):
        with pytest.raises(BracketNotFound, match="Unable to find a possible root"):
            bracket(lambda x: 1.0, 3.0).unwrap()
