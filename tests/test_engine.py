"""
Tests for the dispatch facade.
"""
import pytest

from gacha_engine import (
    DistributionResult,
    ExpectationResult,
    GachaRequest,
    InitialState,
    UnsupportedCombination,
    run,
    run_distribution,
    run_expectation,
    supported_combinations,
)


def _request(key, **kwargs):
    game, pool = key.split("-")
    return GachaRequest(game, pool, **kwargs)


class TestRegistry:
    def test_six_combinations(self):
        assert supported_combinations() == [
            "genshin-character",
            "genshin-weapon",
            "hsr-character",
            "hsr-lightcone",
            "zzz-character",
            "zzz-weapon",
        ]


class TestRunExpectation:
    def test_every_variant(self, variant_key):
        result = run_expectation(_request(variant_key, target_count=2))
        assert isinstance(result, ExpectationResult)
        assert result.mean > 1

    def test_more_copies_cost_more(self, variant_key):
        one = run_expectation(_request(variant_key)).mean
        three = run_expectation(_request(variant_key, target_count=3)).mean
        assert three > one

    def test_zzz_character_matches_hsr_character(self):
        state = InitialState(pity=42, is_guaranteed=True)
        assert run_expectation(_request("zzz-character", initial_state=state)) == \
            run_expectation(_request("hsr-character", initial_state=state))

    def test_unsupported(self):
        with pytest.raises(UnsupportedCombination) as exc:
            run_expectation(GachaRequest("genshin", "lightcone"))
        assert exc.value.key == "genshin-lightcone"
        assert exc.value.status == 400
        assert "genshin-lightcone" in str(exc.value)


class TestRunDistribution:
    def test_every_variant(self, variant_key):
        result = run_distribution(_request(variant_key, budget=150), sample_count=300, seed=11)
        assert isinstance(result, DistributionResult)
        assert result.pulls.mean > 1
        assert result.success_rate is not None
        assert result.returns is not None

    def test_seed_replays(self):
        request = _request("genshin-character", target_count=2)
        assert run_distribution(request, sample_count=200, seed=9) == run_distribution(request, sample_count=200, seed=9)

    def test_unsupported(self):
        with pytest.raises(UnsupportedCombination):
            run_distribution(GachaRequest("hsr", "weapon"), sample_count=10)

    def test_to_dict_wire_keys(self):
        data = run_distribution(_request("hsr-lightcone", budget=80), sample_count=200, seed=1).to_dict()
        assert set(data) == {"pulls", "successRate", "returns"}
        assert set(data["pulls"]) == {"mean", "p25", "p50", "p75", "p90", "p95"}


class TestRun:
    def test_expectation_mode(self):
        assert isinstance(run(_request("hsr-character")), ExpectationResult)

    def test_distribution_mode(self):
        result = run(_request("hsr-character", mode="distribution"), sample_count=100, seed=2)
        assert isinstance(result, DistributionResult)
