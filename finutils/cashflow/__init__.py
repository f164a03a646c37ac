# finutils/cashflow/__init__.py
from . import period
from .annuity import fv, nper, pmt, pv, rate
from .irr import dnpv, irr, npv
from .rate import apr2irr, irr2apr

__all__ = ["period", "npv", "dnpv", "irr", "pv", "fv", "pmt", "nper", "rate", "irr2apr", "apr2irr"]
