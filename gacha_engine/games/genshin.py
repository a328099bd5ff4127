"""
Genshin Impact event wishes (5.0+ rules).
"""
from gacha_engine.logic import GachaLogic


class GenshinCharacterLogic(GachaLogic):
    """
    Character event wish with Capturing Radiance.

    Losing a 50/50 increments the radiance counter; once it reaches 3 the
    next 5-star is the featured character regardless. The aggregate win
    rate below 3 is 55%. A guaranteed win does not break the streak, only
    a won 50/50 resets it.
    """
    GAME, POOL = "genshin", "character"

    PITY_MAX = 90
    BASE_RATE = 0.006
    SOFT_PITY_START = 74
    SOFT_PITY_STEP = 0.06

    BASE_WIN_RATE = 0.55
    SECONDARY_MAX = 4
    SECONDARY_CHARGED = 3
    SECONDARY_FIELD = "mingguang_counter"

    PROB_4_STAR = 0.051
    PROB_UP_4_STAR = 0.5
    NUM_STANDARD_4_STAR_CHARS = 44
    OFF_BANNER_CHAR_SHARE = 44 / (44 + 18)

    NUM_STANDARD_5_STARS = 7
    UP_5_STAR_RETURNS = (10, 10, 25)
    STANDARD_5_STAR_RETURNS = (0, 10, 25)
    STANDARD_4_STAR_CHAR_RETURNS = (0, 2, 5)
    UP_4_STAR_RETURN = 2
    UP_4_STAR_C6_RETURN = 5
    OFF_BANNER_4_STAR_RETURN = 2

    def after_win(self, was_guaranteed, secondary):
        return False, secondary if was_guaranteed else 0


class GenshinWeaponLogic(GachaLogic):
    """
    Weapon event wish with Epitomized Path capped at one fate point.

    Any off-target 5-star fills the path, so the next 5-star is the charted
    weapon. A request flagged as guaranteed starts with a full path.
    """
    GAME, POOL = "genshin", "weapon"

    PITY_MAX = 80
    BASE_RATE = 0.007
    SOFT_PITY_START = 64
    SOFT_PITY_STEP = 0.07

    BASE_WIN_RATE = 0.375
    SECONDARY_MAX = 2
    SECONDARY_CHARGED = 1
    SECONDARY_FIELD = "fate_point"

    PROB_4_STAR = 0.06
    PROB_UP_4_STAR = 0.75
    NUM_STANDARD_4_STAR_CHARS = 44
    OFF_BANNER_CHAR_SHARE = 44 / (44 + 18)

    FIVE_STAR_FIXED_RETURN = 10
    STANDARD_4_STAR_CHAR_RETURNS = (0, 2, 5)
    UP_4_STAR_RETURN = 2
    UP_4_STAR_C6_RETURN = 2
    OFF_BANNER_4_STAR_RETURN = 2

    def normalize_initial(self, initial_state):
        pity, is_guaranteed, fate = super().normalize_initial(initial_state)
        if is_guaranteed:
            fate = self.SECONDARY_CHARGED
        return pity, is_guaranteed, fate
