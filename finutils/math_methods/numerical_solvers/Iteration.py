# finutils/math_methods/numerical_solvers/Iteration.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union


class ErrorKind(str, Enum):
    BRACKET_NOT_FOUND = "bracket_not_found"
    NO_SIGN_CHANGE = "no_sign_change"
    STEP_OUTSIDE_BOUNDS = "step_outside_bounds"


class RootFindingError(Exception):
    """Base class for root-finding failures raised by ``Err.unwrap()``."""

    kind: ErrorKind


class BracketNotFound(RootFindingError):
    """Geometric expansion ran out of attempts without a sign change."""

    kind = ErrorKind.BRACKET_NOT_FOUND


class NoSignChange(RootFindingError):
    """The bounds share the sign of f: zero or an even number of roots inside."""

    kind = ErrorKind.NO_SIGN_CHANGE


class StepOutsideBounds(RootFindingError):
    """A Newton–Raphson step left the original bracket."""

    kind = ErrorKind.STEP_OUTSIDE_BOUNDS


_ERRORS = {cls.kind: cls for cls in (BracketNotFound, NoSignChange, StepOutsideBounds)}


@dataclass(frozen=True)
class Ok:
    """
    Successful solver outcome.

    ``value`` is the root estimate (or the ``(lower, upper)`` pair for
    ``bracket``); ``iterations`` is the number of steps actually used.
    Running out of budget is still an ``Ok``: compare ``iterations`` with
    the budget to detect non-convergence.
    """

    value: Union[float, Tuple[float, float]]
    iterations: int = 0

    ok = True

    def unwrap(self):
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed solver outcome, tagged with the kind of failure."""

    kind: ErrorKind
    detail: str

    ok = False

    def unwrap(self):
        raise _ERRORS[self.kind](self.detail)


Result = Union[Ok, Err]


@dataclass
class Iteration:
    """
    Working state of a single bisection or Newton–Raphson call.

    Function values at the bounds and at the estimate are cached here and
    carried from step to step, never re-evaluated.
    """

    f: Callable[[float], float]
    lower_bound: float
    flower_bound: float
    est: float
    fest: float
    upper_bound: float
    fupper_bound: float
    tol: float
    left: int
    fd: Optional[Callable[[float], float]] = None
    dx: float = 0.0
    pdx: float = 0.0


NO_SIGN_CHANGE_DETAIL = (
    "lower_bound and upper_bound do not bracket a root, or possibly bracket multiple roots"
)


def validate_bounds(lower: float, upper: float) -> None:
    if lower > upper:
        raise ValueError("bounds must satisfy lower <= upper")


__all__ = [
    "ErrorKind",
    "RootFindingError",
    "BracketNotFound",
    "NoSignChange",
    "StepOutsideBounds",
    "Ok",
    "Err",
    "Result",
    "Iteration",
    "validate_bounds",
]
