"""Residual-accumulation evaluator: register scalar residual terms and sum them at a point."""

from .term import ResidualTerm, TermResult
from .evaluator import EvalOptions, EvalResult, ResidualEvaluator, TermEvaluationError

__all__ = [
    "ResidualTerm",
    "TermResult",
    "ResidualEvaluator",
    "EvalOptions",
    "EvalResult",
    "TermEvaluationError",
]
