# finutils/math_methods/numerical_solvers/Solve.py
import logging
from typing import Callable

from finutils.config import (
    DEFAULT_STAGE1_MAX_ITER,
    DEFAULT_STAGE2_MAX_ITER,
    DEFAULT_TOLERANCE,
)
from finutils.math_methods.numerical_solvers.Bisection import bisection
from finutils.math_methods.numerical_solvers.Bracket import bracket
from finutils.math_methods.numerical_solvers.Iteration import Ok, Result
from finutils.math_methods.numerical_solvers.Newton_Raphson import newton_raphson

logger = logging.getLogger(__name__)


def solve(
    f: Callable[[float], float],
    fprime: Callable[[float], float],
    guess: float,
    tol: float = DEFAULT_TOLERANCE,
    niter1: int = DEFAULT_STAGE1_MAX_ITER,
    niter2: int = DEFAULT_STAGE2_MAX_ITER,
) -> Result:
    """
    Two-phase solver for f(x) = 0, tuned for IRR from net present value.

    A couple of bisection steps move in close to the root, then Newton–Raphson
    converges quickly from a fresh bracket around that estimate:

        bracket(guess) -> bisection(niter1) -> bracket(est) -> newton_raphson(niter2)

    The first stage to fail ends the call, and its Err is returned as is.
    On success the Ok carries the bisection plus Newton–Raphson iterations.
    """
    res = bracket(f, guess)
    if not res.ok:
        return res
    lower, upper = res.value

    res = bisection(f, lower, upper, tol, niter1)
    if not res.ok:
        return res
    iters1 = res.iterations

    res = bracket(f, res.value)
    if not res.ok:
        return res
    lower, upper = res.value

    res = newton_raphson(f, fprime, lower, upper, tol, niter2)
    if not res.ok:
        return res

    logger.debug("solve from %r: root %r (%d + %d iterations)", guess, res.value, iters1, res.iterations)
    return Ok(res.value, iters1 + res.iterations)


__all__ = ["solve"]
