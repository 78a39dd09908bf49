from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import math

from ..term import ResidualTerm, TermResult


@dataclass
class FunctionTerm(ResidualTerm):
    """Wraps a plain callable ``f(x) -> float`` as a residual term.

    Arithmetic and domain errors raised by the callable, and non-finite
    results, are reported as evaluation failures. Other exceptions propagate.
    """

    func: Callable[[float], float]

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise TypeError("func must be callable")

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", type(self).__name__)

    def evaluate(self, x: float) -> TermResult:
        try:
            y = float(self.func(x))
        except (ArithmeticError, ValueError):
            return self.failure()
        if not math.isfinite(y):
            return self.failure(y)
        return self.success(y)


@dataclass
class LogTerm(ResidualTerm):
    """``scale * log(x)``; fails outside the domain ``x > 0``."""

    scale: float = 1.0

    def evaluate(self, x: float) -> TermResult:
        if not (x > 0.0) or math.isinf(x):
            return self.failure()
        return self.success(self.scale * math.log(x))
