"""
Single entry point for expectation and distribution requests.
"""
import logging

from gacha_engine.config import DEFAULT_CONFIG
from gacha_engine.errors import UnsupportedCombination
from gacha_engine.games import (
    GenshinCharacterLogic,
    GenshinWeaponLogic,
    HSRCharacterLogic,
    HSRLightConeLogic,
    ZZZCharacterLogic,
    ZZZWeaponLogic,
)
from gacha_engine.markov import ExpectationModel
from gacha_engine.rng import SampleSource
from gacha_engine.simulation import MonteCarloModel

logger = logging.getLogger(__name__)

MODEL_LOGIC = {
    logic.key: logic
    for logic in (
        GenshinCharacterLogic(),
        GenshinWeaponLogic(),
        HSRCharacterLogic(),
        HSRLightConeLogic(),
        ZZZCharacterLogic(),
        ZZZWeaponLogic(),
    )
}

EXPECTATION_MODELS = {
    key: ExpectationModel(logic)
    for key, logic in MODEL_LOGIC.items()
    if key != "zzz-character"
}
# identical chain to the Star Rail character warp
EXPECTATION_MODELS["zzz-character"] = EXPECTATION_MODELS["hsr-character"]


def supported_combinations():
    return sorted(MODEL_LOGIC)


def _lookup(registry, request):
    try:
        return registry[request.key]
    except KeyError:
        logger.warning("rejected unsupported combination %s", request.key)
        raise UnsupportedCombination(request.key) from None


def run_expectation(request):
    return _lookup(EXPECTATION_MODELS, request).compute(request)


def run_distribution(request, sample_count=None, seed=None, config=None):
    logic = _lookup(MODEL_LOGIC, request)
    config = DEFAULT_CONFIG if config is None else config
    rng = SampleSource(chunk_size=config.rng_chunk_size, seed=seed)
    return MonteCarloModel(logic, config).run(request, rng, sample_count)


def run(request, sample_count=None, seed=None, config=None):
    """Dispatch on ``request.mode``."""
    if request.mode == "distribution":
        return run_distribution(request, sample_count, seed=seed, config=config)
    return run_expectation(request)
