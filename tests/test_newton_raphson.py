"""Tests for finutils.math_methods.numerical_solvers.Newton_Raphson."""

from __future__ import annotations

import logging

import pytest

from finutils.math_methods.numerical_solvers.Iteration import ErrorKind, StepOutsideBounds
from finutils.math_methods.numerical_solvers.Newton_Raphson import newton_raphson


class TestConvergence:
    def test_root_at_minus_one(self, quadratic):
        f, fd = quadratic
        res = newton_raphson(f, fd, -1.3, -0.9)
        assert res.ok
        assert round(res.value, 12) == -1.0
        assert res.iterations == 5

    def test_root_at_minus_two_thirds(self, quadratic):
        f, fd = quadratic
        res = newton_raphson(f, fd, -0.7, 0.0)
        assert res.ok
        assert round(res.value, 12) == -0.666666666667
        assert res.iterations == 6


class TestBudget:
    def test_single_step_budget(self, quadratic):
        # est = -0.7, f = -0.03, f' = 0.8, next est = -0.7 - (-0.03 / 0.8) = -0.6625
        f, fd = quadratic
        res = newton_raphson(f, fd, -0.8, -0.6, 1.0e-12, 1)
        assert res.ok
        assert res.iterations == 1
        assert round(res.value, 4) == -0.6625

    def test_cycle_spends_budget_without_error(self, cubic_cycle):
        f, fd = cubic_cycle
        res = newton_raphson(f, fd, -2, 2, 1.0e-12, 10)
        assert res.ok
        assert res.value == 0.0
        assert res.iterations == 10

    def test_cycle_with_odd_budget_ends_on_other_point(self, cubic_cycle):
        f, fd = cubic_cycle
        res = newton_raphson(f, fd, -2, 2, 1.0e-12, 9)
        assert res.ok
        assert res.value == 1.0
        assert res.iterations == 9


class TestFailures:
    def test_no_sign_change_from_stationary_point(self, inverted_parabola):
        f, fd = inverted_parabola
        res = newton_raphson(f, fd, -2, 2, 1.0e-12, 10)
        assert not res.ok
        assert res.kind is ErrorKind.NO_SIGN_CHANGE

    def test_step_outside_bounds_near_stationary_point(self, inverted_parabola):
        f, fd = inverted_parabola
        res = newton_raphson(f, fd, -1.1, 0.9, 1.0e-12, 10)
        assert not res.ok
        assert res.kind is ErrorKind.STEP_OUTSIDE_BOUNDS
        assert res.detail == "stepped outside of initial bounds"

    def test_unwrap_raises_step_outside_bounds(self, inverted_parabola):
        f, fd = inverted_parabola
        with pytest.raises(StepOutsideBounds):
            newton_raphson(f, fd, -1.1, 0.9).unwrap()

    def test_inverted_bounds_raise(self, quadratic):
        f, fd = quadratic
        with pytest.raises(ValueError):
            newton_raphson(f, fd, 0.0, -0.7)


class TestZeroDerivative:
    def test_zero_derivative_reads_as_converged(self):
        # x^3 - 3x has a minimum at x = 1 (f = -2); the bracket midpoint lands on it
        def f(x):
            return x ** 3 - 3 * x

        def fd(x):
            return 3 * x ** 2 - 3

        res = newton_raphson(f, fd, 0.2, 1.8)
        assert res.ok
        assert res.value == 1.0
        assert res.iterations == 0
        assert f(res.value) == -2.0


class TestDegenerateBracket:
    def test_rerun_on_own_estimate_terminates(self, quadratic):
        f, fd = quadratic
        est = newton_raphson(f, fd, -1.3, -0.9).value
        res = newton_raphson(f, fd, est, est)
        if res.ok:
            assert res.iterations == 0
        else:
            assert res.kind is ErrorKind.NO_SIGN_CHANGE

    def test_exact_root_as_bounds_converges(self, quadratic):
        f, fd = quadratic
        res = newton_raphson(f, fd, -1.0, -1.0)
        assert res.ok
        assert res.value == -1.0
        assert res.iterations == 0


class TestEvaluations:
    def test_each_step_evaluates_f_and_derivative_once(self, quadratic):
        f, fd = quadratic
        f_calls, fd_calls = [], []

        def counted_f(x):
            f_calls.append(x)
            return f(x)

        def counted_fd(x):
            fd_calls.append(x)
            return fd(x)

        res = newton_raphson(counted_f, counted_fd, -0.8, -0.6, 1.0e-12, 1)
        assert res.iterations == 1
        # midpoint, lower, upper, then the new estimate
        assert len(f_calls) == 4
        assert len(fd_calls) == 2

    def test_spent_budget_logs_last_two_steps(self, cubic_cycle, caplog):
        f, fd = cubic_cycle
        with caplog.at_level(logging.DEBUG, logger="finutils.math_methods.numerical_solvers.Newton_Raphson"):
            newton_raphson(f, fd, -2, 2, 1.0e-12, 10)
        # at 1 the step is 1.0, back at 0 it is -1.0
        assert "last steps 1.0, -1.0" in caplog.text
