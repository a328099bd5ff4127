from gacha_engine.games.genshin import GenshinCharacterLogic, GenshinWeaponLogic
from gacha_engine.games.hsr import HSRCharacterLogic, HSRLightConeLogic
from gacha_engine.games.zzz import ZZZCharacterLogic, ZZZWeaponLogic

__all__ = [
    "GenshinCharacterLogic",
    "GenshinWeaponLogic",
    "HSRCharacterLogic",
    "HSRLightConeLogic",
    "ZZZCharacterLogic",
    "ZZZWeaponLogic",
]
