"""
Monte Carlo distribution models.
"""
import logging
import math
import time

from gacha_engine.config import DEFAULT_CONFIG
from gacha_engine.logic import clamp_int
from gacha_engine.stats import compute_percentiles, compute_success_rate
from gacha_engine.types import DistributionResult

logger = logging.getLogger(__name__)


class PullState:
    """Mutable state of one simulated run; never shared between runs."""

    __slots__ = ("pity", "pity4", "is_guaranteed", "is_guaranteed4", "secondary", "collection")

    def __init__(self, pity=0, is_guaranteed=False, secondary=0):
        self.pity = pity
        self.pity4 = 0
        self.is_guaranteed = is_guaranteed
        self.is_guaranteed4 = False
        self.secondary = secondary
        self.collection = {"up_5_star": 0}

    @classmethod
    def from_request(cls, logic, request):
        pity, is_guaranteed, secondary = logic.normalize_initial(request.initial_state)
        return cls(pity, is_guaranteed, secondary)

    def __repr__(self):
        return (f"PullState(pity={self.pity}, pity4={self.pity4}, is_guaranteed={self.is_guaranteed}, "
                f"is_guaranteed4={self.is_guaranteed4}, secondary={self.secondary})")


class MonteCarloModel:
    def __init__(self, logic, config=None):
        self.logic = logic
        self.config = DEFAULT_CONFIG if config is None else config

    def simulate_one_full_run(self, request, rng):
        """Pulls and byproduct currency to collect ``target_count`` copies."""
        state = PullState.from_request(self.logic, request)
        total_pulls, total_returns = 0, 0
        for _ in range(clamp_int(request.target_count, 1, math.inf)):
            pulls, returns = self.logic.simulate_one_target(state, rng, request.up4_c6)
            total_pulls += pulls
            total_returns += returns
        return total_pulls, total_returns

    def run(self, request, rng, simulation_count=None):
        if simulation_count is None:
            simulation_count = self.config.simulation_count_for(self.logic.POOL)
        start = time.perf_counter()
        pulls_results, returns_results = [], []
        for _ in range(simulation_count):
            pulls, returns = self.simulate_one_full_run(request, rng)
            pulls_results.append(pulls)
            returns_results.append(returns)
        logger.info("simulated %d runs of %s in %.3fs", simulation_count, self.logic.key, time.perf_counter() - start)

        success_rate = None
        if request.budget is not None:
            success_rate = compute_success_rate(pulls_results, request.budget)
        return DistributionResult(
            pulls=compute_percentiles(pulls_results),
            success_rate=success_rate,
            returns=compute_percentiles(returns_results) if returns_results else None,
        )
