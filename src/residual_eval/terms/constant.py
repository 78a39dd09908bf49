from __future__ import annotations

from dataclasses import dataclass

from ..term import ResidualTerm, TermResult


@dataclass
class ConstantTerm(ResidualTerm):
    """Residual term with the same value everywhere."""

    value: float = 0.0

    def evaluate(self, x: float) -> TermResult:
        return self.success(self.value)
