"""
Honkai: Star Rail limited warps.
"""
from gacha_engine.logic import GachaLogic


class HSRCharacterLogic(GachaLogic):
    GAME, POOL = "hsr", "character"

    PITY_MAX = 90
    BASE_RATE = 0.006
    SOFT_PITY_START = 74
    SOFT_PITY_STEP = 0.06
    BASE_WIN_RATE = 0.5

    PROB_4_STAR = 0.051
    PROB_UP_4_STAR = 0.5
    NUM_STANDARD_4_STAR_CHARS = 22
    OFF_BANNER_CHAR_SHARE = 22 / (22 + 29)

    NUM_STANDARD_5_STARS = 7
    UP_5_STAR_RETURNS = (0, 40, 100)
    STANDARD_5_STAR_RETURNS = (0, 40, 100)
    STANDARD_4_STAR_CHAR_RETURNS = (0, 8, 20)
    UP_4_STAR_RETURN = 8
    UP_4_STAR_C6_RETURN = 20
    OFF_BANNER_4_STAR_RETURN = 8


class HSRLightConeLogic(GachaLogic):
    GAME, POOL = "hsr", "lightcone"

    PITY_MAX = 80
    BASE_RATE = 0.008
    SOFT_PITY_START = 66
    SOFT_PITY_STEP = 0.08
    BASE_WIN_RATE = 0.75

    PROB_4_STAR = 0.066
    PROB_UP_4_STAR = 0.75
    NUM_STANDARD_4_STAR_CHARS = 22
    OFF_BANNER_CHAR_SHARE = 22 / (22 + 29)

    # every 5-star light cone and every 4-star light cone pays a flat amount
    FIVE_STAR_FIXED_RETURN = 40
    STANDARD_4_STAR_CHAR_RETURNS = (0, 8, 20)
    UP_4_STAR_RETURN = 8
    UP_4_STAR_C6_RETURN = 8
    OFF_BANNER_4_STAR_RETURN = 8
