# finutils/cashflow/irr.py
"""
Net present value and internal rate of return of a regular cash flow.

A cash flow is a sequence [c0, c1, ..., cn] of amounts at evenly spaced
periods (monthly, weekly, ...), outgoings negative and income positive.
The internal rate of return i is the root of

            c1        c2               cn
    c0 + ------- + ------- + ... + -------- = 0
          1 + i    (1+i)^2         (1+i)^n

Example (UK OFT144): a £7,500 advance repaid by 48 monthly instalments of
£207.67, the first one after three months together with a £25 fee, and a
final adjusted instalment of £207.50:

>>> c = [-7500, 0, 0, 232.67] + [207.67] * 46 + [207.50]
>>> round(irr(c).value, 12)
0.011384044595
"""
from __future__ import annotations

import logging
from typing import Sequence, Union

from finutils.config import DEFAULT_IRR_GUESS
from finutils.math_methods.numerical_solvers.Iteration import Result
from finutils.math_methods.numerical_solvers.Solve import solve

logger = logging.getLogger(__name__)

Number = Union[float, int]


def npv(cashflow: Sequence[Number], rate: float) -> float:
    """
    Net present value of ``cashflow`` discounted at ``rate`` per period.

    >>> round(npv([-500000, 200000, 300000, 200000], 0.1), 2)
    80015.03
    """
    f = 1.0 / (1.0 + rate)
    total, fm = 0.0, 1.0
    for c in cashflow:
        total += fm * c
        fm *= f
    return total


def dnpv(cashflow: Sequence[Number], rate: float) -> float:
    """
    First derivative of the net present value with respect to ``rate``:

        dnpv = - c1 / (1+i)^2 - 2 c2 / (1+i)^3 - ...

    >>> round(dnpv([-500000, 200000, 300000, 200000], 0.1), 2)
    -1025886.21
    """
    f = 1.0 / (1.0 + rate)
    total, k, fm = 0.0, 0.0, f
    for c in cashflow:
        total -= k * fm * c
        k += 1.0
        fm *= f
    return total


def irr(cashflow: Sequence[Number], guess: float = DEFAULT_IRR_GUESS) -> Result:
    """
    Internal rate of return of ``cashflow``, per period.

    Parameters
    ----------
    cashflow : sequence of float
        Amounts per period, first one at time 0. Lists and numpy arrays work.
    guess : float, default 0.1
        Starting point for the two-phase solver.

    Returns
    -------
    Ok(rate, iterations) or Err from the solver
    (BRACKET_NOT_FOUND, NO_SIGN_CHANGE or STEP_OUTSIDE_BOUNDS).
    """
    flows = [float(c) for c in cashflow]

    def f(i: float) -> float:
        return npv(flows, i)

    def fd(i: float) -> float:
        return dnpv(flows, i)

    res = solve(f, fd, guess)
    if not res.ok:
        logger.debug("irr of %d-period cash flow failed: %s", len(flows), res.kind.value)
    return res


__all__ = ["npv", "dnpv", "irr"]
