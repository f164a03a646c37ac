# finutils/cashflow/annuity.py
"""
Regular fixed payments.

Present value (pv), future value (fv), payment (pmt), rate (i) and number
of periods (n) are tied together by

                          (1+i)^n - 1
    pv (1+i)^n + pmt (1+i*b) ----------- + fv = 0
                               i

where b = 1 when payments fall at the beginning of each period
(``begin=True``) and 0 when they fall at the end (default). Each function
solves this relation for one of the quantities. Negative amounts are money
paid out, positive amounts money received.
"""
from __future__ import annotations

import math
from typing import Union

from finutils.cashflow.irr import irr
from finutils.math_methods.numerical_solvers.Iteration import Result

Number = Union[float, int]


def _pvifa(i: Number, n: Number) -> float:
    return ((1.0 + i) ** n - 1.0) / (i * (1.0 + i) ** n)

def _pvif(i: Number, n: Number) -> float:
    return 1.0 / (1.0 + i) ** n

def _fvifa(i: Number, n: Number) -> float:
    return ((1.0 + i) ** n - 1.0) / i

def _fvif(i: Number, n: Number) -> float:
    return (1.0 + i) ** n

def _due(i: Number, begin: bool) -> float:
    return 1.0 + (i if begin else 0.0)


def pv(pmt: Number, i: Number, n: Number, fv: Number = 0, begin: bool = False) -> float:
    """
    Present value of regular fixed payments.

    Parameters
    ----------
    pmt : payment per period
    i : rate per period as DECIMAL
    n : number of periods
    fv : future value, default 0
    begin : True if payments are made at the start of each period

    Examples
    --------
    Initial investment needed to reach £15,692.93 after 10 years of saving
    £100 a month at 5% a year compounded monthly:

    >>> round(pv(-100, 0.05 / 12, 10 * 12, 15692.93), 2)
    -100.0
    """
    if i == 0:
        return -(pmt * n + fv)
    return -(pmt * _due(i, begin) * _pvifa(i, n) + fv * _pvif(i, n))


def fv(pv: Number, pmt: Number, i: Number, n: Number, begin: bool = False) -> float:
    """
    Future value of regular fixed payments.

    >>> round(fv(-100, -100, 0.05 / 12, 10 * 12), 2)
    15692.93
    """
    if i == 0:
        return -(pmt * n + pv)
    return -(pmt * _due(i, begin) * _fvifa(i, n) + pv * _fvif(i, n))


def pmt(pv: Number, i: Number, n: Number, fv: Number = 0, begin: bool = False) -> float:
    """
    Payment per period against principal plus interest.

    Monthly payment needed to pay off a £200,000 loan in 15 years at 7.5%:

    >>> round(pmt(200000, 0.075 / 12, 15 * 12), 2)
    -1854.02
    """
    if i == 0:
        return -(fv + pv) / n
    return -(fv + pv * _fvif(i, n)) / (_due(i, begin) * _fvifa(i, n))


def nper(pv: Number, pmt: Number, i: Number, fv: Number = 0, begin: bool = False) -> float:
    """
    Number of payment periods.

    Paying £150 a month towards a £8,000 loan at 7% a year:

    >>> round(nper(8000, -150, 0.07 / 12), 5)
    64.07335
    """
    if i == 0:
        return -(pv + fv) / pmt
    x = pmt * _due(i, begin) / i
    return math.log((-fv + x) / (pv + x)) / math.log(1.0 + i)


def rate(pv: Number, pmt: Number, n: Number, fv: Number = 0, begin: bool = False) -> Result:
    """
    Rate of interest per period, solved as the IRR of the equivalent cash flow.

    ``n`` must be a whole number of periods >= 1; integral floats such as
    ``4 * period.MONTHLY`` are accepted.

    Returns Ok(rate, iterations) or the solver's Err.
    """
    if n != int(n) or n < 1:
        raise ValueError(f"n must be a whole number of periods >= 1, got {n!r}")
    n = int(n)
    cashflow = (
        [pv + (pmt if begin else 0.0)]
        + [pmt] * (n - 1)
        + [(0.0 if begin else pmt) + fv]
    )
    return irr(cashflow)


__all__ = ["pv", "fv", "pmt", "nper", "rate"]
