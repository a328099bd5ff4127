"""
Tests for the sample source and the statistics reducer.
"""
import pytest

from gacha_engine.rng import SampleSource
from gacha_engine.stats import compute_percentiles, compute_success_rate
from gacha_engine.types import PullStats


class TestSampleSource:
    def test_values_in_unit_interval(self):
        rng = SampleSource(chunk_size=1000)
        values = [rng.get() for _ in range(5000)]
        assert all(0.0 <= v < 1.0 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_refills_across_chunks(self):
        """Draws continue past the end of a buffer without repeating it."""
        rng = SampleSource(chunk_size=4, seed=7)
        values = [rng.get() for _ in range(12)]
        assert len(values) == 12
        assert values[:4] != values[4:8]

    def test_seed_replays(self):
        a = SampleSource(chunk_size=16, seed=42)
        b = SampleSource(chunk_size=16, seed=42)
        assert [a.get() for _ in range(40)] == [b.get() for _ in range(40)]

    def test_mean_is_near_half(self):
        rng = SampleSource(chunk_size=10_000, seed=1)
        values = [rng.get() for _ in range(50_000)]
        assert abs(sum(values) / len(values) - 0.5) < 0.01

    def test_rejects_bad_chunk_size(self):
        with pytest.raises(ValueError):
            SampleSource(chunk_size=-1)

    def test_rejects_zero_chunk_size(self):
        with pytest.raises(ValueError):
            SampleSource(chunk_size=0)

    def test_default_chunk_size(self):
        assert SampleSource(seed=0).chunk_size == 1_000_000


class TestComputePercentiles:
    def test_empty(self):
        stats = compute_percentiles([])
        assert stats == PullStats(mean=0.0)
        assert stats.to_dict() == {"mean": 0.0}

    def test_single_sample(self):
        stats = compute_percentiles([5])
        assert stats.mean == 5
        assert stats.p25 == stats.p50 == stats.p75 == stats.p90 == stats.p95 == 5

    def test_nearest_rank(self):
        """Index floor(p/100 * n) of the sorted samples."""
        stats = compute_percentiles([10, 3, 7, 1, 9, 2, 8, 4, 6, 5])
        assert stats.mean == pytest.approx(5.5)
        assert (stats.p25, stats.p50, stats.p75, stats.p90, stats.p95) == (3, 6, 8, 10, 10)

    def test_to_dict_has_all_fields(self):
        assert set(compute_percentiles([1, 2, 3]).to_dict()) == {"mean", "p25", "p50", "p75", "p90", "p95"}


class TestComputeSuccessRate:
    def test_five_samples_budget_three(self):
        assert compute_success_rate([1, 2, 3, 4, 5], 3) == pytest.approx(60.0)

    def test_zero_budget(self):
        assert compute_success_rate([1, 2, 3], 0) == 0

    def test_negative_budget(self):
        assert compute_success_rate([1, 2, 3], -10) == 0

    def test_empty_samples(self):
        assert compute_success_rate([], 100) == 0

    def test_all_within_budget(self):
        assert compute_success_rate([10, 20, 30], 30) == pytest.approx(100.0)
