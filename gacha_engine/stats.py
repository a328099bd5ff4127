"""
Reduce Monte Carlo samples to summary statistics.
"""
import numpy as np

from gacha_engine.types import PERCENTILES, PullStats


def compute_percentiles(samples):
    """
    Mean plus nearest-rank p25/p50/p75/p90/p95.

    Percentile p picks index floor(p / 100 * n) of the ascending samples,
    clamped to [0, n - 1]. No samples gives a mean of 0 and no percentiles.
    """
    data = np.sort(np.asarray(samples, dtype=np.float64))
    n = data.size
    if n == 0:
        return PullStats(mean=0.0)

    def pick(p):
        idx = min(n - 1, max(0, int(np.floor(p / 100 * n))))
        return float(data[idx])

    return PullStats(mean=float(data.mean()), **{f"p{p}": pick(p) for p in PERCENTILES})


def compute_success_rate(samples, budget):
    """Percentage (0-100) of samples at or below ``budget``."""
    data = np.asarray(samples, dtype=np.float64)
    if data.size == 0 or budget is None or budget <= 0:
        return 0.0
    return float(np.count_nonzero(data <= budget)) / data.size * 100
