from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import Callable, Union

from ..term import ResidualTerm, TermResult
from .function import FunctionTerm


@dataclass
class LeastSquaresTerm(ResidualTerm):
    """One term of a nonlinear least-squares objective.

    The value of the term is::

        ((f_in(x) - goal) / sigma) ** 2

    Parameters
    ----------
    f_in:
        A residual term (anything with ``evaluate(x)``) or a plain callable
        ``f(x) -> float``. Failure of ``f_in`` is reported as failure of this term.
    goal:
        Target value of ``f_in``.
    sigma:
        Weight (tolerance) of the term. Must be nonzero.
    """

    f_in: Union[ResidualTerm, Callable[[float], float]]
    goal: float = 0.0
    sigma: float = 1.0

    def __post_init__(self) -> None:
        if not isinstance(self.goal, Real):
            raise ValueError("goal must be a float or int")
        if not isinstance(self.sigma, Real):
            raise ValueError("sigma must be a float or int")
        if self.sigma == 0:
            raise ValueError("sigma cannot be 0")
        self.goal = float(self.goal)
        self.sigma = float(self.sigma)
        if not callable(getattr(self.f_in, "evaluate", None)):
            self.f_in = FunctionTerm(self.f_in)

    def evaluate(self, x: float) -> TermResult:
        ok, f = self.f_in.evaluate(x)
        if not ok:
            return self.failure()
        temp = (f - self.goal) / self.sigma
        y = temp * temp
        if not math.isfinite(y):
            return self.failure(y)
        return self.success(y)
