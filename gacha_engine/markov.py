"""
Exact expectation models.

Each variant is an absorbing Markov chain over (pity, guarantee, secondary)
states. Solving ``(I - Q) E = 1`` gives the expected pulls until the target
5-star from every state; solving ``(I - Q) B = R`` gives, per state, the
distribution of the secondary counter at the moment the target drops,
which is all that carries over into the next target.
"""
import logging
import math
import threading
import time

import numpy as np

from gacha_engine.errors import Uninitialized
from gacha_engine.logic import clamp_int
from gacha_engine.matrix import solve_linear_system
from gacha_engine.types import ExpectationResult

logger = logging.getLogger(__name__)

GUARANTEE_MAX = 2


class MarkovChain:
    def __init__(self, logic):
        self.logic = logic
        self.pity_max = logic.PITY_MAX
        self.secondary_max = logic.SECONDARY_MAX
        self.total_states = self.pity_max * GUARANTEE_MAX * self.secondary_max

    def state_to_index(self, pity, is_guaranteed, secondary):
        return pity + int(is_guaranteed) * self.pity_max + secondary * self.pity_max * GUARANTEE_MAX

    def index_to_state(self, index):
        secondary, rest = divmod(index, self.pity_max * GUARANTEE_MAX)
        is_guaranteed, pity = divmod(rest, self.pity_max)
        return pity, bool(is_guaranteed), secondary

    def build(self):
        """
        Return ``(I - Q, R)``.

        ``Q[i, j]`` is the probability of moving from transient state i to
        transient state j in one pull; ``R[i, s]`` is the probability of
        obtaining the target on this pull and leaving the secondary counter
        at s.
        """
        logic = self.logic
        n = self.total_states
        A = np.identity(n)
        R = np.zeros((n, self.secondary_max))
        for i in range(n):
            pity, is_guaranteed, secondary = self.index_to_state(i)
            p5 = logic.get_prob_5_star(pity)
            if p5 < 1.0:
                A[i, self.state_to_index(pity + 1, is_guaranteed, secondary)] -= 1.0 - p5
            if p5 > 0:
                p_win = logic.get_win_probability(is_guaranteed, secondary)
                if p_win < 1.0:
                    next_g, next_s = logic.after_lose(is_guaranteed, secondary)
                    A[i, self.state_to_index(0, next_g, next_s)] -= p5 * (1.0 - p_win)
                if p_win > 0:
                    _, final_s = logic.after_win(is_guaranteed, secondary)
                    R[i, final_s] += p5 * p_win
        return A, R


class TableCache:
    """
    Process-wide store of solved tables, keyed by (variant key, table kind).

    Tables are built lazily on first use, at most once per key even under
    concurrent first requests, and never invalidated.
    """

    def __init__(self):
        self._tables = {}
        self._locks = {}
        self._guard = threading.Lock()

    def __contains__(self, key):
        return key in self._tables

    def peek(self, key):
        return self._tables.get(key)

    def get_or_build(self, key, builder):
        table = self._tables.get(key)
        if table is not None:
            return table
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
        with lock:
            table = self._tables.get(key)
            if table is None:
                table = builder()
                table.setflags(write=False)
                self._tables[key] = table
            else:
                logger.debug("table %s was built by another thread", key)
        return table


TABLE_CACHE = TableCache()


class ExpectationModel:
    def __init__(self, logic, cache=None):
        self.logic = logic
        self.chain = MarkovChain(logic)
        self.cache = TABLE_CACHE if cache is None else cache

    @property
    def key(self):
        return self.logic.key

    def _solve_expectations(self):
        start = time.perf_counter()
        A, _ = self.chain.build()
        table = solve_linear_system(A, np.ones(self.chain.total_states))
        logger.info("solved expectation table for %s (%d states) in %.3fs",
                    self.key, self.chain.total_states, time.perf_counter() - start)
        return table

    def _solve_absorption_probabilities(self):
        start = time.perf_counter()
        A, R = self.chain.build()
        table = np.column_stack([solve_linear_system(A, R[:, col]) for col in range(R.shape[1])])
        logger.info("solved absorption table for %s (%d states) in %.3fs",
                    self.key, self.chain.total_states, time.perf_counter() - start)
        return table

    def ensure_tables_calculated(self, with_absorption=False):
        self.cache.get_or_build((self.key, "expectation"), self._solve_expectations)
        if with_absorption:
            self.cache.get_or_build((self.key, "absorption"), self._solve_absorption_probabilities)

    @property
    def expectation_table(self):
        table = self.cache.peek((self.key, "expectation"))
        if table is None:
            raise Uninitialized(f"expectation table for {self.key} has not been built")
        return table

    @property
    def absorption_table(self):
        table = self.cache.peek((self.key, "absorption"))
        if table is None:
            raise Uninitialized(f"absorption table for {self.key} has not been built")
        return table

    def get_expectation_for_state(self, pity, is_guaranteed=False, secondary=0):
        return float(self.expectation_table[self.chain.state_to_index(pity, is_guaranteed, secondary)])

    def compute(self, request):
        target_count = clamp_int(request.target_count, 1, math.inf)
        self.ensure_tables_calculated(with_absorption=target_count > 1)

        pity, is_guaranteed, secondary = self.logic.normalize_initial(request.initial_state)
        start = self.chain.state_to_index(pity, is_guaranteed, secondary)
        E = self.expectation_table
        total_pulls = float(E[start])
        if target_count == 1:
            return ExpectationResult(mean=total_pulls)

        # every later target starts from pity 0 without guarantee; only the
        # secondary counter's distribution carries over
        B = self.absorption_table
        reset = [self.chain.state_to_index(0, False, s) for s in range(self.chain.secondary_max)]
        reset_expectations = E[reset]
        reset_absorption = B[reset]
        dist = B[start]
        for _ in range(target_count - 1):
            total_pulls += float(dist @ reset_expectations)
            dist = dist @ reset_absorption
        return ExpectationResult(mean=total_pulls)
