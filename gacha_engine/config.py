"""
Engine configuration.

Game rules are class constants on the variants; this only holds the knobs
that trade accuracy against latency.
"""
import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "GACHA_ENGINE_"


@dataclass(frozen=True)
class EngineConfig:
    rng_chunk_size: int = 1_000_000
    character_simulation_count: int = 100_000
    weapon_simulation_count: int = 50_000
    max_simulation_count: int = 1_000_000
    log_level: str = "WARNING"

    def simulation_count_for(self, pool):
        """Default Monte Carlo sample count for a pool."""
        if pool == "character":
            return self.character_simulation_count
        return self.weapon_simulation_count

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        defaults = cls()

        def _int(name, default):
            raw = environ.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return default
            value = int(raw)
            if value <= 0:
                raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {value}")
            return value

        log_level = environ.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            rng_chunk_size=_int("RNG_CHUNK_SIZE", defaults.rng_chunk_size),
            character_simulation_count=_int("CHARACTER_SIMULATIONS", defaults.character_simulation_count),
            weapon_simulation_count=_int("WEAPON_SIMULATIONS", defaults.weapon_simulation_count),
            max_simulation_count=_int("MAX_SIMULATIONS", defaults.max_simulation_count),
            log_level=log_level,
        )


DEFAULT_CONFIG = EngineConfig()
