from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import math

import numpy as np

from ..term import ResidualTerm, TermResult


@dataclass(eq=False)
class PolynomialTerm(ResidualTerm):
    """Polynomial residual term.

    Parameters
    ----------
    coeffs:
        Coefficients in increasing order of degree, i.e. ``c0 + c1*x + c2*x**2 + ...``.

    Evaluation fails when the result is not finite (overflow, or a non-finite ``x``).
    """

    coeffs: Sequence[float] = field(default_factory=lambda: [0.0])

    def __post_init__(self) -> None:
        self.coeffs = np.asarray(self.coeffs, dtype=float)
        if self.coeffs.ndim != 1 or self.coeffs.size == 0:
            raise ValueError("coeffs must be a non-empty 1D sequence")

    @property
    def degree(self) -> int:
        return int(self.coeffs.size) - 1

    def evaluate(self, x: float) -> TermResult:
        with np.errstate(over="ignore", invalid="ignore"):
            y = float(np.polynomial.polynomial.polyval(x, self.coeffs))
        if not math.isfinite(y):
            return self.failure(y)
        return self.success(y)
