"""
Zenless Zone Zero channels.

Both share the Star Rail rule shape: the exclusive channel is the HSR
character banner with a different 4-star and payout table, the W-engine
channel is the light cone banner on its own drop curve.
"""
from gacha_engine.games.hsr import HSRCharacterLogic, HSRLightConeLogic


class ZZZCharacterLogic(HSRCharacterLogic):
    GAME, POOL = "zzz", "character"

    PROB_4_STAR = 0.094
    PROB_UP_4_STAR = 0.5
    NUM_STANDARD_4_STAR_CHARS = 12
    OFF_BANNER_CHAR_SHARE = 7.05 / (7.05 + 2.35)

    NUM_STANDARD_5_STARS = 6


class ZZZWeaponLogic(HSRLightConeLogic):
    GAME, POOL = "zzz", "weapon"

    PITY_MAX = 80
    BASE_RATE = 0.01
    SOFT_PITY_START = 65
    SOFT_PITY_STEP = 0.061875
    BASE_WIN_RATE = 0.75

    PROB_4_STAR = 0.15
    PROB_UP_4_STAR = 0.75
    NUM_STANDARD_4_STAR_CHARS = 12
    OFF_BANNER_CHAR_SHARE = 1.875 / (13.125 + 1.875)
