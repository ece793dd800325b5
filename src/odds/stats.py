"""
stats.py
--------

Empirical checks of sampler fairness: outcome histograms (NumPy) and
chi-square goodness of fit against the uniform distribution (SciPy).
"""

from __future__ import annotations

__all__ = ["UniformityReport", "sample_counts", "hit_rate", "uniformity",]

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from .bounded import uniform_bounded
from .rng import thread_rng


@dataclass(frozen=True)
class UniformityReport:
    """Chi-square result for a histogram of bounded draws."""
    chi2: float
    p_value: float
    max_deviation: float
    max_relative_deviation: float

    def passed(self, alpha: float = 0.001) -> bool:
        return self.p_value >= alpha


def sample_counts(rng, bound: int, n: int, method: Optional[str] = None) -> NDArray[np.int64]:
    """Draw `n` values in [0, bound) and return the count of each outcome."""
    if bound < 1:
        raise ValueError(f"bound must be >= 1, got {bound}")
    draws = np.fromiter((uniform_bounded(rng, bound, method) for _ in range(n)),
                        dtype=np.int64, count=n)
    return np.bincount(draws, minlength=bound)


def hit_rate(check: Callable[..., bool], trials: int, rng=None) -> float:
    """Fraction of `trials` for which `check(rng)` is True."""
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    if rng is None:
        rng = thread_rng()
    hits = sum(1 for _ in range(trials) if check(rng))
    return hits / trials


def uniformity(counts: NDArray[np.integer]) -> UniformityReport:
    """Chi-square goodness of fit of `counts` against a flat distribution."""
    counts = np.asarray(counts, dtype=np.float64)
    if counts.ndim != 1 or counts.size < 2:
        raise ValueError("counts must be a 1-D array with at least two bins")
    total = counts.sum()
    if total <= 0:
        raise ValueError("counts must not be empty")
    chi2, p_value = stats.chisquare(counts)
    freq = counts / total
    max_dev = float(np.max(np.abs(freq - 1.0 / counts.size)))
    max_rel = float(np.max(np.abs(freq * counts.size - 1.0)))
    return UniformityReport(chi2=float(chi2), p_value=float(p_value),
                            max_deviation=max_dev, max_relative_deviation=max_rel)
