from __future__ import annotations

from dataclasses import dataclass, field
import sys
from typing import Callable, Iterator, List, Optional, Tuple

import numpy as np

from .term import ResidualTerm


FAILURE_POLICIES = ("raise", "skip", "include")


def _term_name(term) -> str:
    return getattr(term, "name", type(term).__name__)


def _check_policy(on_failure: str) -> None:
    if on_failure not in FAILURE_POLICIES:
        raise ValueError(f"on_failure must be one of {FAILURE_POLICIES}, got {on_failure!r}")


def _stderr_log(msg: str) -> None:
    print(msg, file=sys.stderr)


@dataclass
class EvalOptions:
    verbose: bool = True
    on_failure: str = "raise"   # "raise" | "skip" | "include"
    log: Optional[Callable[[str], None]] = None   # defaults to stderr

    def __post_init__(self) -> None:
        _check_policy(self.on_failure)

    def emit(self, msg: str) -> None:
        if not self.verbose:
            return
        (self.log or _stderr_log)(msg)


@dataclass
class EvalResult:
    """Partial result of one evaluation pass.

    Parameters
    ----------
    total:
        Sum of the accumulated term values.
    values:
        Per-term values in registration order. Failed terms hold ``nan``
        unless the ``"include"`` policy summed their reported value.
    failed:
        Indices of terms that reported failure.
    """

    total: float
    values: np.ndarray
    failed: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class TermEvaluationError(RuntimeError):
    """A registered term reported failure during evaluation."""

    def __init__(self, index: int, term: ResidualTerm, x: float):
        self.index = index
        self.term = term
        self.x = x
        super().__init__(f"residuals[{index}] ({_term_name(term)}) failed to evaluate at x={x:g}")


def format_diagnostic(index: int, value: float, total: float) -> str:
    return "Computed residuals[%d]=%g, total=%g" % (index, value, total)


class ResidualEvaluator:
    """An ordered registry of residual terms and their summed value.

    Terms are not owned: the evaluator keeps references in registration order
    and never copies, mutates or releases them.
    """

    def __init__(self, options: Optional[EvalOptions] = None):
        self.options = options if options is not None else EvalOptions()
        self._terms: List[ResidualTerm] = []

    def add_residual_term(self, term: ResidualTerm) -> int:
        if not callable(getattr(term, "evaluate", None)):
            raise TypeError(f"{term!r} does not implement evaluate(x)")
        self._terms.append(term)
        return len(self._terms)

    @property
    def terms(self) -> Tuple[ResidualTerm, ...]:
        return tuple(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[ResidualTerm]:
        return iter(self._terms)

    def evaluate(self, x: float, options: Optional[EvalOptions] = None) -> EvalResult:
        opts = options if options is not None else self.options
        _check_policy(opts.on_failure)
        values = np.full(len(self._terms), np.nan, dtype=float)
        failed: List[int] = []
        total = 0.0

        for i, term in enumerate(self._terms):
            ok, y = term.evaluate(x)
            if not ok:
                if opts.on_failure == "raise":
                    raise TermEvaluationError(i, term, x)
                failed.append(i)
                if opts.on_failure == "skip":
                    opts.emit(f"Skipped residuals[{i}] ({_term_name(term)}): evaluation failed at x={x:g}")
                    continue
            y = float(y)
            values[i] = y
            total += y
            opts.emit(format_diagnostic(i, y, total))

        return EvalResult(total=total, values=values, failed=failed)

    def eval(self, x: float, options: Optional[EvalOptions] = None) -> float:
        return self.evaluate(x, options).total

    def residuals(self, x: float) -> np.ndarray:
        """Per-term values at ``x``, computed without diagnostics."""
        quiet = EvalOptions(verbose=False, on_failure=self.options.on_failure)
        return self.evaluate(x, quiet).values

    def summary(self) -> str:
        lines = []
        lines.append(f"ResidualEvaluator with {len(self._terms)} terms (on_failure={self.options.on_failure})")
        for i, term in enumerate(self._terms):
            lines.append(f"  - [{i}] {term!r}")
        return "\n".join(lines)
