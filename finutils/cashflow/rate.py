# finutils/cashflow/rate.py
from __future__ import annotations
from typing import Union

Number = Union[float, int]

def irr2apr(irr: Number, t: Number) -> float:
    """
    Convert a periodic internal rate of return into an APR (in percent).

    Parameters
    ----------
    irr : rate per period as DECIMAL (0.01 for 1% per period)
    t : number of periods per year (see finutils.cashflow.period)

    Returns
    -------
    float: annual percentage rate, e.g. 14.5 for 14.5%
    """
    if irr == 0:
        return 0.0
    return ((1.0 + irr) ** t - 1.0) * 100.0

def apr2irr(apr: Number, t: Number) -> float:
    """
    Convert an APR (in percent) into the equivalent rate per period.
    Inverse of irr2apr.
    """
    if apr == 0:
        return 0.0
    return (1.0 + apr / 100.0) ** (1.0 / t) - 1.0

__all__ = ["irr2apr", "apr2irr"]
