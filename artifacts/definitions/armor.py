"""
Armor forms and the mods that can be layered on top of them.

Forms carry fixed values (nothing is rolled). Mods are deltas; see
generation.apply_armor_mod for the clamping rules.
"""

from typing import Tuple

from ..types import ArmorFormDatum, ArmorMod as M, ArmorModDatum, BodyPart as BP


ARMOR_FORM_DATA: Tuple[ArmorFormDatum, ...] = (
    ArmorFormDatum(
        "", "white", "null", 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        BP.NONE, False,
        (M.NULL, M.NULL, M.NULL, M.NULL, M.NULL),
    ),
    # name, color, material, vol, wgt, enc, cov, thk, env, wrm, sto, bash, cut, hit
    ArmorFormDatum(
        "Robe", "red", "wool", 1500, 700, 1, 90, 3, 0, 2, 0, -8, 0, -3,
        BP.TORSO | BP.LEG_L | BP.LEG_R, False,
        (M.LIGHT, M.BULKY, M.POCKETED, M.FURRED, M.PADDED),
    ),
    ArmorFormDatum(
        "Coat", "brown", "leather", 3500, 1600, 2, 80, 2, 1, 4, 1000, -6, 0, -3,
        BP.TORSO, False,
        (M.LIGHT, M.POCKETED, M.FURRED, M.PADDED, M.PLATED),
    ),
    ArmorFormDatum(
        "Mask", "white", "wood", 1000, 100, 2, 50, 2, 1, 2, 0, 2, 0, -2,
        BP.EYES | BP.MOUTH, False,
        (M.FURRED, M.FURRED, M.NULL, M.NULL, M.NULL),
    ),
    ArmorFormDatum(
        "Helm", "darkgray", "silver", 1500, 700, 2, 85, 3, 0, 1, 0, 8, 0, -2,
        BP.HEAD, False,
        (M.BULKY, M.FURRED, M.PADDED, M.PLATED, M.NULL),
    ),
    ArmorFormDatum(
        "Gloves", "lightblue", "leather", 500, 100, 1, 90, 3, 1, 2, 0, -4, 0, -2,
        BP.HAND_L | BP.HAND_R, True,
        (M.BULKY, M.FURRED, M.PADDED, M.PLATED, M.NULL),
    ),
    ArmorFormDatum(
        "Boots", "blue", "leather", 1500, 250, 1, 75, 3, 1, 3, 0, 4, 0, -1,
        BP.FOOT_L | BP.FOOT_R, True,
        (M.LIGHT, M.BULKY, M.PADDED, M.PLATED, M.NULL),
    ),
    ArmorFormDatum(
        "Ring", "lightgreen", "silver", 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        BP.NONE, True,
        (M.NULL, M.NULL, M.NULL, M.NULL, M.NULL),
    ),
)


ARMOR_MOD_DATA: Tuple[ArmorModDatum, ...] = (
    ArmorModDatum("", "null", 0, 0, 0, 0, 0, 0, 0, 0),
    # "It is ...", material, vol, wgt, enc, cov, thk, env, wrm, sto
    ArmorModDatum("very thin and light.", "null", -1000, -950, -2, -1, -1, -1, -1, 0),
    ArmorModDatum("extremely bulky.", "null", 2000, 1150, 2, 1, 1, 0, 1, 0),
    ArmorModDatum("covered in pockets.", "null", 250, 150, 1, 0, 0, 0, 0, 4000),
    ArmorModDatum("disgustingly furry.", "wool", 1000, 250, 1, 1, 1, 1, 3, 0),
    ArmorModDatum("leather-padded.", "leather", 1000, 450, 1, 1, 1, 0, 1, -750),
    ArmorModDatum("plated in iron.", "iron", 1000, 1400, 3, 2, 2, 0, 1, -1000),
)
