"""
Artifact effect identifiers, their power costs, and the candidate pools.

Each effect family (passive / active) is a dense IntEnum laid out as:

    NULL | good effects ... | SPLIT | bad effects ...

The integer values are what gets written to save files, so members must
never be reordered.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Union


class PassiveEffect(IntEnum):
    NULL = 0

    STR_UP = 1
    DEX_UP = 2
    PER_UP = 3
    INT_UP = 4
    ALL_UP = 5
    SPEED_UP = 6
    PBLUE = 7
    SNAKES = 8
    INVISIBLE = 9
    CLAIRVOYANCE = 10
    CLAIRVOYANCE_PLUS = 11
    SUPER_CLAIRVOYANCE = 12
    STEALTH = 13
    EXTINGUISH = 14
    GLOW = 15
    PSYSHIELD = 16
    RESIST_ELECTRICITY = 17
    CARRY_MORE = 18
    SAP_LIFE = 19

    SPLIT = 20

    HUNGER = 21
    THIRST = 22
    SMOKE = 23
    EVIL = 24
    SCHIZO = 25
    RADIOACTIVE = 26
    MUTAGENIC = 27
    ATTENTION = 28
    STR_DOWN = 29
    DEX_DOWN = 30
    PER_DOWN = 31
    INT_DOWN = 32
    ALL_DOWN = 33
    SPEED_DOWN = 34
    FORCE_TELEPORT = 35
    MOVEMENT_NOISE = 36
    BAD_WEATHER = 37
    SICK = 38


class ActiveEffect(IntEnum):
    NULL = 0

    STORM = 1
    FIREBALL = 2
    ADRENALINE = 3
    MAP = 4
    BLOOD = 5
    FATIGUE = 6
    ACIDBALL = 7
    PULSE = 8
    HEAL = 9
    CONFUSED = 10
    ENTRANCE = 11
    BUGS = 12
    TELEPORT = 13
    LIGHT = 14
    GROWTH = 15
    HURTALL = 16

    SPLIT = 17

    RADIATION = 18
    PAIN = 19
    MUTATE = 20
    PARALYZE = 21
    FIRESTORM = 22
    ATTENTION = 23
    TELEGLOW = 24
    NOISE = 25
    SCREAM = 26
    DIM = 27
    FLASH = 28
    VOMIT = 29
    SHADOWS = 30


class ChargeType(IntEnum):
    """How an artifact tool regains charges."""
    NULL = 0
    TIME = 1
    SOLAR = 2
    PAIN = 3
    HP = 4


Effect = Union[PassiveEffect, ActiveEffect]

# Highest member of each family (inclusive bound of the bad sub-range)
LAST_PASSIVE = max(PassiveEffect)
LAST_ACTIVE = max(ActiveEffect)
LAST_CHARGE_TYPE = max(ChargeType)


# ============================================================================
# Cost catalog
# ============================================================================

PASSIVE_EFFECT_COST: Dict[PassiveEffect, int] = {
    PassiveEffect.NULL: 0,

    PassiveEffect.STR_UP: 3,
    PassiveEffect.DEX_UP: 3,
    PassiveEffect.PER_UP: 3,
    PassiveEffect.INT_UP: 3,
    PassiveEffect.ALL_UP: 5,
    PassiveEffect.SPEED_UP: 4,
    PassiveEffect.PBLUE: 2,
    PassiveEffect.SNAKES: 4,
    PassiveEffect.INVISIBLE: 7,
    PassiveEffect.CLAIRVOYANCE: 5,
    PassiveEffect.CLAIRVOYANCE_PLUS: 7,
    PassiveEffect.SUPER_CLAIRVOYANCE: 50,
    PassiveEffect.STEALTH: 2,
    PassiveEffect.EXTINGUISH: 2,
    PassiveEffect.GLOW: 1,
    PassiveEffect.PSYSHIELD: 1,
    PassiveEffect.RESIST_ELECTRICITY: 3,
    PassiveEffect.CARRY_MORE: 3,
    PassiveEffect.SAP_LIFE: 5,

    PassiveEffect.SPLIT: 0,

    PassiveEffect.HUNGER: -2,
    PassiveEffect.THIRST: -2,
    PassiveEffect.SMOKE: -1,
    PassiveEffect.EVIL: -5,
    PassiveEffect.SCHIZO: -3,
    PassiveEffect.RADIOACTIVE: -5,
    PassiveEffect.MUTAGENIC: -3,
    PassiveEffect.ATTENTION: -5,
    PassiveEffect.STR_DOWN: -2,
    PassiveEffect.DEX_DOWN: -2,
    PassiveEffect.PER_DOWN: -2,
    PassiveEffect.INT_DOWN: -2,
    PassiveEffect.ALL_DOWN: -5,
    PassiveEffect.SPEED_DOWN: -4,
    PassiveEffect.FORCE_TELEPORT: -5,
    PassiveEffect.MOVEMENT_NOISE: -3,
    PassiveEffect.BAD_WEATHER: -2,
    PassiveEffect.SICK: -1,
}

ACTIVE_EFFECT_COST: Dict[ActiveEffect, int] = {
    ActiveEffect.NULL: 0,

    ActiveEffect.STORM: 2,
    ActiveEffect.FIREBALL: 4,
    ActiveEffect.ADRENALINE: 5,
    ActiveEffect.MAP: 4,
    ActiveEffect.BLOOD: 0,
    ActiveEffect.FATIGUE: 0,
    ActiveEffect.ACIDBALL: 4,
    ActiveEffect.PULSE: 5,
    ActiveEffect.HEAL: 4,
    ActiveEffect.CONFUSED: 3,
    ActiveEffect.ENTRANCE: 3,
    ActiveEffect.BUGS: 3,
    ActiveEffect.TELEPORT: 5,
    ActiveEffect.LIGHT: 1,
    ActiveEffect.GROWTH: 4,
    ActiveEffect.HURTALL: 6,

    ActiveEffect.SPLIT: 0,

    ActiveEffect.RADIATION: -3,
    ActiveEffect.PAIN: -2,
    ActiveEffect.MUTATE: -3,
    ActiveEffect.PARALYZE: -2,
    ActiveEffect.FIRESTORM: -3,
    ActiveEffect.ATTENTION: -6,
    ActiveEffect.TELEGLOW: -4,
    ActiveEffect.NOISE: -2,
    ActiveEffect.SCREAM: -2,
    ActiveEffect.DIM: -3,
    ActiveEffect.FLASH: -4,
    ActiveEffect.VOMIT: -2,
    ActiveEffect.SHADOWS: -5,
}


def effect_cost(effect: Effect) -> int:
    """Power value of a passive or active effect."""
    if isinstance(effect, ActiveEffect):
        return ACTIVE_EFFECT_COST[effect]
    return PASSIVE_EFFECT_COST[effect]


def effects_cost(effects) -> int:
    return sum(effect_cost(e) for e in effects)


# ============================================================================
# Candidate pools
# ============================================================================

def fill_good_passive() -> List[PassiveEffect]:
    return [PassiveEffect(i) for i in range(PassiveEffect.NULL + 1, PassiveEffect.SPLIT)]


def fill_bad_passive() -> List[PassiveEffect]:
    return [PassiveEffect(i) for i in range(PassiveEffect.SPLIT + 1, LAST_PASSIVE + 1)]


def fill_good_active() -> List[ActiveEffect]:
    return [ActiveEffect(i) for i in range(ActiveEffect.NULL + 1, ActiveEffect.SPLIT)]


def fill_bad_active() -> List[ActiveEffect]:
    return [ActiveEffect(i) for i in range(ActiveEffect.SPLIT + 1, LAST_ACTIVE + 1)]


def is_sentinel(effect: Effect) -> bool:
    return effect.name in ("NULL", "SPLIT")


# ============================================================================
# Name tables
# ============================================================================

# "AEP_STR_UP" <-> PassiveEffect.STR_UP etc. Sentinels are never named.
PASSIVE_EFFECT_NAMES: Dict[str, PassiveEffect] = {
    f"AEP_{e.name}": e for e in PassiveEffect if not is_sentinel(e)
}
ACTIVE_EFFECT_NAMES: Dict[str, ActiveEffect] = {
    f"AEA_{e.name}": e for e in ActiveEffect if not is_sentinel(e)
}
CHARGE_TYPE_NAMES: Dict[str, ChargeType] = {
    f"ARTC_{c.name}": c for c in ChargeType
}


def effect_name(effect: Effect) -> str:
    prefix = "AEA" if isinstance(effect, ActiveEffect) else "AEP"
    return f"{prefix}_{effect.name}"


def passive_effect_from_name(name: str) -> PassiveEffect:
    return PASSIVE_EFFECT_NAMES[name]


def active_effect_from_name(name: str) -> ActiveEffect:
    return ACTIVE_EFFECT_NAMES[name]


def charge_type_from_name(name: str) -> ChargeType:
    return CHARGE_TYPE_NAMES[name]
