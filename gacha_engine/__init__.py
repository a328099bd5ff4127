"""
Pull-count calculator for gacha banners: exact expectations from absorbing
Markov chains and Monte Carlo distributions of pulls and byproduct currency.
"""
from gacha_engine.engine import run, run_distribution, run_expectation, supported_combinations
from gacha_engine.errors import (
    DimensionMismatch,
    GachaError,
    InvalidRequest,
    SingularMatrix,
    Uninitialized,
    UnsupportedCombination,
)
from gacha_engine.types import DistributionResult, ExpectationResult, GachaRequest, InitialState, PullStats

__version__ = "0.1.0"

__all__ = [
    "run",
    "run_distribution",
    "run_expectation",
    "supported_combinations",
    "DimensionMismatch",
    "GachaError",
    "InvalidRequest",
    "SingularMatrix",
    "Uninitialized",
    "UnsupportedCombination",
    "DistributionResult",
    "ExpectationResult",
    "GachaRequest",
    "InitialState",
    "PullStats",
]
