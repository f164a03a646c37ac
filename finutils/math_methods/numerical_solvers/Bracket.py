# finutils/math_methods/numerical_solvers/Bracket.py
import logging
import math
from typing import Callable

from finutils.config import (
    BRACKET_MAX_ATTEMPTS,
    BRACKET_STEP_SIZE,
    DEFAULT_BRACKET_PRECISION,
)
from finutils.math_methods.numerical_solvers.Iteration import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)


def bracket(
    f: Callable[[float], float],
    guess: float,
    precision: int = DEFAULT_BRACKET_PRECISION,
) -> Result:
    """
    Find lower/upper bounds around an initial guess that bracket a root.

    Parameters
    ----------
    f : callable
        Function returning f(x).
    guess : float
        Initial guess. The first half-width is scaled to its magnitude:
        dt = 10 ** (round(log10(|guess|)) - precision), with 1.0 standing
        in for a zero guess.
    precision : int, default 2
        Number of decades below the guess magnitude for the first step.

    Returns
    -------
    Ok((lower, upper), attempts) with f(lower) * f(upper) < 0, or
    Err(BRACKET_NOT_FOUND) after the attempt budget is used up.

    Notes
    -----
    - The endpoint with the smaller |f| is pushed outward by 1.6x the width.
    - The bracket holds some sign change, not necessarily the nearest root.

    Examples
    --------
    3x^2 + 5x + 2 has roots at -1 and -2/3:

    >>> bracket(lambda x: 3 * x * x + 5 * x + 2, -0.7).value
    (-0.71, -0.6579999999999999)
    """
    dt = 10.0 ** (round(math.log10(abs(guess) or 1.0)) - precision)
    lower, upper = guess - dt, guess + dt
    flower, fupper = f(lower), f(upper)

    for attempt in range(BRACKET_MAX_ATTEMPTS):
        if flower * fupper < 0.0:
            logger.debug("bracket around %r: (%r, %r) after %d expansions", guess, lower, upper, attempt)
            return Ok((lower, upper), attempt)

        if abs(flower) < abs(fupper):
            lower = lower + BRACKET_STEP_SIZE * (lower - upper)
            flower = f(lower)
        else:
            upper = upper + BRACKET_STEP_SIZE * (upper - lower)
            fupper = f(upper)

    logger.debug("no bracket found around %r", guess)
    return Err(ErrorKind.BRACKET_NOT_FOUND, "Unable to find a possible root around the guess")


__all__ = ["bracket"]
