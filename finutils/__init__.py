# finutils/__init__.py
from .math_methods import bisection, bracket, newton_raphson, solve, Ok, Err, ErrorKind
from .cashflow import npv, dnpv, irr, irr2apr, apr2irr
from .cashflow.adapters.pandas_python import compute_irr_on_dataframe

__all__ = [
    "bracket", "bisection", "newton_raphson", "solve", "Ok", "Err", "ErrorKind",
    "npv", "dnpv", "irr", "irr2apr", "apr2irr",
    "compute_irr_on_dataframe",
]
__version__ = "0.1.0"
