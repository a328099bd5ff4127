"""
Buffered uniform random source shared by all simulation models.
"""
import numpy as np

from gacha_engine.config import DEFAULT_CONFIG


class SampleSource:
    """
    Hands out uniform [0, 1) values one at a time from a pre-filled numpy
    buffer, refilling it when exhausted.

    ``seed`` is only for deterministic replay in tests; production callers
    leave it unset.
    """

    def __init__(self, chunk_size=None, seed=None):
        self.chunk_size = DEFAULT_CONFIG.rng_chunk_size if chunk_size is None else chunk_size
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        self._generator = np.random.default_rng(seed)
        self._refill()

    def _refill(self):
        # tolist() so that get() hands back plain floats
        self._chunk = self._generator.random(self.chunk_size).tolist()
        self._index = 0

    def get(self):
        if self._index >= self.chunk_size:
            self._refill()
        value = self._chunk[self._index]
        self._index += 1
        return value
