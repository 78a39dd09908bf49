from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple


class TermResult(NamedTuple):
    """Outcome of evaluating one residual term.

    ``value`` is only meaningful when ``ok`` is True.
    """

    ok: bool
    value: float


class ResidualTerm(ABC):
    """Base class for all residual terms.

    A term evaluates a scalar function at a point ``x`` and reports whether
    the evaluation succeeded. Terms are owned by whoever creates them; an
    evaluator only keeps a reference.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def evaluate(self, x: float) -> TermResult:
        raise NotImplementedError

    def __call__(self, x: float) -> TermResult:
        return self.evaluate(x)

    @staticmethod
    def success(value: float) -> TermResult:
        return TermResult(True, float(value))

    @staticmethod
    def failure(value: float = float("nan")) -> TermResult:
        return TermResult(False, float(value))
