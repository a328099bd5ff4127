"""
Shared rule shape of every banner variant.

A variant is a ``GachaLogic`` subclass that only sets class constants
(and, where a game deviates, overrides a transition hook). The same rule
methods drive both the Markov chain in ``markov.py`` and the pull-by-pull
loop in ``simulate_one_target``, so exact and simulated results describe
the same banner.
"""
import math

# a standard item's payout rises once it has been seen this many times
DUPLICATE_OVERFLOW = 7


def clamp_int(value, lo, hi):
    """Floor ``value`` into [lo, hi]; NaN or None maps to ``lo``."""
    if value is None:
        return lo
    value = float(value)
    if math.isnan(value) or value < lo:
        return lo
    if value > hi:
        return hi
    return int(math.floor(value))


class GachaLogic:
    GAME = None
    POOL = None

    # 5-star drop curve
    PITY_MAX = 90
    BASE_RATE = 0.006
    SOFT_PITY_START = 74
    SOFT_PITY_STEP = 0.06

    # 50/50 rule and the optional streak / fate counter
    BASE_WIN_RATE = 0.5
    SECONDARY_MAX = 1
    SECONDARY_CHARGED = None
    SECONDARY_FIELD = None

    # 4-star tier
    PROB_4_STAR = 0.051
    PITY4_MAX = 10
    PROB_UP_4_STAR = 0.5
    NUM_STANDARD_4_STAR_CHARS = 22
    OFF_BANNER_CHAR_SHARE = 22 / (22 + 29)

    # byproduct currency, as (first copy, duplicate, overflow duplicate)
    FIVE_STAR_FIXED_RETURN = None
    NUM_STANDARD_5_STARS = 7
    UP_5_STAR_RETURNS = (0, 40, 100)
    STANDARD_5_STAR_RETURNS = (0, 40, 100)
    STANDARD_4_STAR_CHAR_RETURNS = (0, 8, 20)
    UP_4_STAR_RETURN = 8
    UP_4_STAR_C6_RETURN = 20
    OFF_BANNER_4_STAR_RETURN = 8

    @property
    def key(self):
        return f"{self.GAME}-{self.POOL}"

    def __repr__(self):
        return f"<{type(self).__name__} {self.key}>"

    # -- rules -------------------------------------------------------------

    def get_prob_5_star(self, pity_index):
        pull = pity_index + 1
        if pull >= self.PITY_MAX:
            return 1.0
        if pull < self.SOFT_PITY_START:
            return self.BASE_RATE
        return min(1.0, self.BASE_RATE + (pull - self.SOFT_PITY_START + 1) * self.SOFT_PITY_STEP)

    def is_charged(self, is_guaranteed, secondary):
        if is_guaranteed:
            return True
        return self.SECONDARY_CHARGED is not None and secondary >= self.SECONDARY_CHARGED

    def get_win_probability(self, is_guaranteed, secondary=0):
        return 1.0 if self.is_charged(is_guaranteed, secondary) else self.BASE_WIN_RATE

    def after_win(self, was_guaranteed, secondary):
        """(guarantee, secondary) once the target 5-star is obtained."""
        return False, 0

    def after_lose(self, was_guaranteed, secondary):
        """(guarantee, secondary) after an off-target 5-star."""
        return True, min(secondary + 1, self.SECONDARY_MAX - 1)

    def normalize_initial(self, initial_state):
        """Clamp a request's starting state to (pity, is_guaranteed, secondary)."""
        pity = clamp_int(initial_state.pity, 0, self.PITY_MAX - 1)
        secondary = 0
        if self.SECONDARY_FIELD is not None:
            secondary = clamp_int(getattr(initial_state, self.SECONDARY_FIELD), 0, self.SECONDARY_MAX - 1)
        return pity, bool(initial_state.is_guaranteed), secondary

    # -- simulation --------------------------------------------------------

    def simulate_one_target(self, state, rng, up4_c6=False):
        """Pull until the target 5-star drops; returns (pulls, byproduct)."""
        pulls, returns = 0, 0
        while True:
            pulls += 1
            state.pity += 1
            state.pity4 += 1
            p5 = self.get_prob_5_star(state.pity - 1)
            if rng.get() < p5:
                was_guaranteed = state.is_guaranteed
                p_win = self.get_win_probability(was_guaranteed, state.secondary)
                is_target = rng.get() < p_win
                state.pity, state.pity4 = 0, 0
                returns += self._five_star_return(is_target, state.collection, rng)
                if is_target:
                    state.is_guaranteed, state.secondary = self.after_win(was_guaranteed, state.secondary)
                    return pulls, returns
                state.is_guaranteed, state.secondary = self.after_lose(was_guaranteed, state.secondary)
            elif state.pity4 >= self.PITY4_MAX or rng.get() < self.PROB_4_STAR / (1 - p5 if p5 < 1 else 0.99):
                returns += self._handle_4_star_pull(state, rng, up4_c6)

    def _five_star_return(self, is_up, collection, rng):
        if self.FIVE_STAR_FIXED_RETURN is not None:
            return self.FIVE_STAR_FIXED_RETURN
        if is_up:
            return _tiered_return(collection, "up_5_star", self.UP_5_STAR_RETURNS)
        key = f"std_5_star_{int(rng.get() * self.NUM_STANDARD_5_STARS)}"
        return _tiered_return(collection, key, self.STANDARD_5_STAR_RETURNS)

    def _handle_4_star_pull(self, state, rng, up4_c6):
        state.pity4 = 0
        if state.is_guaranteed4 or rng.get() < self.PROB_UP_4_STAR:
            state.is_guaranteed4 = False
            return self.UP_4_STAR_C6_RETURN if up4_c6 else self.UP_4_STAR_RETURN
        state.is_guaranteed4 = True
        if rng.get() < self.OFF_BANNER_CHAR_SHARE:
            key = f"std_char_{int(rng.get() * self.NUM_STANDARD_4_STAR_CHARS)}"
            return _tiered_return(state.collection, key, self.STANDARD_4_STAR_CHAR_RETURNS)
        return self.OFF_BANNER_4_STAR_RETURN


def _tiered_return(collection, key, tiers):
    count = collection.get(key, 0) + 1
    collection[key] = count
    first, duplicate, overflow = tiers
    if count == 1:
        return first
    return duplicate if count <= DUPLICATE_OVERFLOW else overflow
