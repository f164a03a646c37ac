# finutils/math_methods/numerical_solvers/__init__.py
from .Iteration import (
    BracketNotFound,
    Err,
    ErrorKind,
    Iteration,
    NoSignChange,
    Ok,
    Result,
    RootFindingError,
    StepOutsideBounds,
)
from .Bracket import bracket
from .Bisection import bisection
from .Newton_Raphson import newton_raphson
from .Solve import solve
