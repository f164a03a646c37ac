# finutils/math_methods/numerical_solvers/Newton_Raphson.py
import logging
from typing import Callable

from finutils.config import DEFAULT_NEWTON_RAPHSON_MAX_ITER, DEFAULT_TOLERANCE
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


def _newton_dx(fest: float, fdest: float) -> float:
    # Zero derivative reads as a zero step, i.e. immediate convergence
    if fdest == 0.0:
        return 0.0
    return fest / fdest


def newton_raphson(
    f: Callable[[float], float],
    fprime: Callable[[float], float],
    lower: float,
    upper: float,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_NEWTON_RAPHSON_MAX_ITER,
) -> Result:
    """
    1D Newton–Raphson root finder for solving f(x) = 0 inside [lower, upper].

    Starts from the midpoint of the bracket and takes full, unclamped Newton
    steps. Convergence is fast near a simple root, but a start close to a
    stationary point can throw the iterate far away, and some functions
    settle into a cycle.

    Parameters
    ----------
    f : callable
        Function returning f(x).
    fprime : callable
        Derivative function returning f'(x).
    lower, upper : float
        Bracket with lower <= upper (ValueError otherwise).
    tol : float, default 1e-12
        Converged once |f(x) / f'(x)| <= tol.
    max_iter : int, default 10
        Iteration budget.

    Returns
    -------
    Ok(est, iterations), Err(NO_SIGN_CHANGE) or Err(STEP_OUTSIDE_BOUNDS).

    Notes
    -----
    - The sign check always uses the original bounds, not the iterate.
    - An iterate outside the original bracket is a failure, not clamped.
    - There is no cycle detection: a cycling iterate spends the budget and
      comes back as Ok with iterations == max_iter.
    - Known sharp edge: f'(est) == 0 gives a zero step, which passes the
      tolerance check even when est is nowhere near a root.

    Examples
    --------
    >>> res = newton_raphson(lambda x: 3 * x * x + 5 * x + 2, lambda x: 6 * x + 5, -1.3, -0.9)
    >>> round(res.value, 12), res.iterations
    (-1.0, 5)
    """
    validate_bounds(lower, upper)

    est = (lower + upper) / 2.0
    fest = f(est)
    it = Iteration(
        f=f,
        fd=fprime,
        lower_bound=lower,
        flower_bound=f(lower),
        est=est,
        fest=fest,
        upper_bound=upper,
        fupper_bound=f(upper),
        tol=tol,
        left=max_iter,
        dx=_newton_dx(fest, fprime(est)),
        pdx=(upper - lower) / 2.0,
    )

    while True:
        if it.flower_bound * it.fupper_bound > 0.0:
            logger.debug("newton_raphson: no sign change on (%r, %r)", it.lower_bound, it.upper_bound)
            return Err(ErrorKind.NO_SIGN_CHANGE, NO_SIGN_CHANGE_DETAIL)

        if (it.lower_bound - it.est) * (it.est - it.upper_bound) < 0.0:
            logger.debug("newton_raphson: iterate %r left (%r, %r)", it.est, it.lower_bound, it.upper_bound)
            return Err(ErrorKind.STEP_OUTSIDE_BOUNDS, "stepped outside of initial bounds")

        if abs(it.dx) <= it.tol:
            logger.debug("newton_raphson converged to %r in %d iterations", it.est, max_iter - it.left)
            return Ok(it.est, max_iter - it.left)

        if it.left <= 0:
            logger.debug("newton_raphson budget of %d spent at %r (last steps %r, %r)", max_iter, it.est, it.pdx, it.dx)
            return Ok(it.est, max_iter - it.left)

        it.est -= it.dx
        it.fest = it.f(it.est)
        it.pdx = it.dx
        it.dx = _newton_dx(it.fest, it.fd(it.est))
        it.left -= 1


__all__ = ["newton_raphson"]
