"""
Request and result records passed across the engine boundary.
"""
from dataclasses import dataclass, field
from typing import Optional

PERCENTILES = (25, 50, 75, 90, 95)


@dataclass(frozen=True)
class InitialState:
    pity: int = 0
    is_guaranteed: bool = False
    mingguang_counter: int = 0
    fate_point: int = 0

    def to_dict(self):
        return {
            "pity": self.pity,
            "isGuaranteed": self.is_guaranteed,
            "mingguangCounter": self.mingguang_counter,
            "fatePoint": self.fate_point,
        }


@dataclass(frozen=True)
class GachaRequest:
    game: str
    pool: str
    target_count: int = 1
    initial_state: InitialState = field(default_factory=InitialState)
    budget: Optional[float] = None
    mode: str = "expectation"
    up4_c6: bool = False

    @property
    def key(self):
        return f"{self.game}-{self.pool}"

    def to_dict(self):
        return {
            "game": self.game,
            "pool": self.pool,
            "mode": self.mode,
            "targetCount": self.target_count,
            "up4C6": self.up4_c6,
            "budget": self.budget,
            "initialState": self.initial_state.to_dict(),
        }


@dataclass(frozen=True)
class PullStats:
    mean: float
    p25: Optional[float] = None
    p50: Optional[float] = None
    p75: Optional[float] = None
    p90: Optional[float] = None
    p95: Optional[float] = None

    def to_dict(self):
        out = {"mean": self.mean}
        for p in PERCENTILES:
            value = getattr(self, f"p{p}")
            if value is not None:
                out[f"p{p}"] = value
        return out


@dataclass(frozen=True)
class ExpectationResult:
    mean: float

    def to_dict(self):
        return {"mean": self.mean}


@dataclass(frozen=True)
class DistributionResult:
    pulls: PullStats
    success_rate: Optional[float] = None
    returns: Optional[PullStats] = None

    def to_dict(self):
        out = {"pulls": self.pulls.to_dict()}
        if self.success_rate is not None:
            out["successRate"] = self.success_rate
        if self.returns is not None:
            out["returns"] = self.returns.to_dict()
        return out
