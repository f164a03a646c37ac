# finutils/math_methods/numerical_solvers/Bisection.py
import logging
from typing import Callable

from finutils.config import DEFAULT_BISECTION_MAX_ITER, DEFAULT_TOLERANCE
from finutils.math_methods.numerical_solvers.Iteration import (
    NO_SIGN_CHANGE_DETAIL,
    Err,
    ErrorKind,
    Iteration,
    Ok,
    Result,
    validate_bounds,
)

logger = logging.getLogger(__name__)


def bisection(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_BISECTION_MAX_ITER,
) -> Result:
    """
    1D bisection root finder for solving f(x) = 0 on [lower, upper].

    Each step halves the bracket, so reaching a tolerance t from an initial
    width e takes about log2(e / t) steps. The default budget of 41 gets a
    unit-sized bracket down to roughly 1e-12.

    Parameters
    ----------
    f : callable
        Function returning f(x).
    lower, upper : float
        Bracket with lower <= upper (ValueError otherwise).
    tol : float, default 1e-12
        Converged once upper - lower <= tol.
    max_iter : int, default 41
        Iteration budget.

    Returns
    -------
    Ok(est, iterations) or Err(NO_SIGN_CHANGE).

    Notes
    -----
    - Checked in order every step: width <= tol, budget spent, sign change.
    - Running out of budget returns Ok with the current midpoint.

    Examples
    --------
    >>> res = bisection(lambda x: 3 * x * x + 5 * x + 2, -1.2, -0.7)
    >>> round(res.value, 12), res.iterations
    (-1.0, 39)
    """
    validate_bounds(lower, upper)

    est = (lower + upper) / 2.0
    it = Iteration(
        f=f,
        lower_bound=lower,
        flower_bound=f(lower),
        est=est,
        fest=f(est),
        upper_bound=upper,
        fupper_bound=f(upper),
        tol=tol,
        left=max_iter,
    )

    while True:
        if abs(it.upper_bound - it.lower_bound) <= it.tol:
            logger.debug("bisection converged to %r in %d iterations", it.est, max_iter - it.left)
            return Ok(it.est, max_iter - it.left)

        if it.left <= 0:
            logger.debug("bisection budget of %d spent at %r", max_iter, it.est)
            return Ok(it.est, max_iter - it.left)

        if it.flower_bound * it.fupper_bound > 0:
            logger.debug("bisection: no sign change on (%r, %r)", it.lower_bound, it.upper_bound)
            return Err(ErrorKind.NO_SIGN_CHANGE, NO_SIGN_CHANGE_DETAIL)

        # Keep the half holding the sign change
        if it.flower_bound * it.fest > 0.0:
            it.lower_bound, it.flower_bound = it.est, it.fest
        else:
            it.upper_bound, it.fupper_bound = it.est, it.fest
        it.est = (it.lower_bound + it.upper_bound) / 2.0
        it.fest = it.f(it.est)
        it.left -= 1


__all__ = ["bisection"]
