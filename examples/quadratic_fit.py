from __future__ import annotations

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

import numpy as np

from residual_eval import EvalOptions, ResidualEvaluator
from residual_eval.terms import LeastSquaresTerm, LogTerm, PolynomialTerm


def main():
    # Samples of y = 1.5 * k**2 with a little noise; the unknown is the curvature k.
    rng = np.random.default_rng(0)
    samples = np.linspace(0.5, 3.0, 6)
    observed = 1.5 * samples ** 2 + rng.normal(scale=0.05, size=samples.size)

    ev = ResidualEvaluator(EvalOptions(verbose=False, on_failure="skip"))
    for s, y in zip(samples, observed):
        ev.add_residual_term(LeastSquaresTerm(PolynomialTerm([0.0, 0.0, s ** 2]), goal=y, sigma=0.05))

    # Barrier keeping k positive; fails (and is skipped) for k <= 0.
    ev.add_residual_term(LogTerm(scale=-1e-3))

    print(ev.summary())

    grid = np.linspace(-0.5, 3.0, 36)
    totals = np.array([ev.evaluate(k).total for k in grid])
    best = grid[int(np.argmin(totals))]
    print(f"Best k on grid: {best:.3f}")

    # Show per-term diagnostics at the best point.
    ev.eval(best, EvalOptions(verbose=True, on_failure="skip"))


if __name__ == "__main__":
    main()
