# finutils/math_methods/__init__.py
from .numerical_solvers import (
    BracketNotFound,
    Err,
    ErrorKind,
    NoSignChange,
    Ok,
    RootFindingError,
    StepOutsideBounds,
    bisection,
    bracket,
    newton_raphson,
    solve,
)

__all__ = [
    "bracket",
    "bisection",
    "newton_raphson",
    "solve",
    "Ok",
    "Err",
    "ErrorKind",
    "RootFindingError",
    "BracketNotFound",
    "NoSignChange",
    "StepOutsideBounds",
]
