"""
Artifact type definitions.

Contains the table index enums, the static datum dataclasses that describe
shapes / forms / mods, and the ArtifactRecord variants produced by generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import List, Tuple, Union

from .effects import ActiveEffect, ChargeType, PassiveEffect


# ----------------- Table indices -----------------

class ArtifactShape(IntEnum):
    NULL = 0
    SPHERE = 1
    ROD = 2
    TEARDROP = 3
    LAMP = 4
    SNAKE = 5
    DISC = 6
    BEADS = 7
    NAPKIN = 8
    URCHIN = 9
    JELLY = 10
    SPIRAL = 11
    PIN = 12
    TUBE = 13
    PYRAMID = 14
    CRYSTAL = 15
    KNOT = 16
    CRESCENT = 17


class ArtifactProperty(IntEnum):
    NULL = 0
    WRIGGLING = 1
    GLOWING = 2
    HUMMING = 3
    MOVING = 4
    WHISPERING = 5
    BREATHING = 6
    DEAD = 7
    ITCHY = 8
    GLITTERING = 9
    ELECTRIC = 10
    SLIMY = 11
    ENGRAVED = 12
    CRACKLING = 13
    WARM = 14
    RATTLING = 15
    SCALED = 16
    FRACTAL = 17


class WeaponType(IntEnum):
    NULL = 0
    BULK = 1    # bulky, works okay for bashing
    CLUB = 2    # designed to bash
    SPEAR = 3   # stab-only
    SWORD = 4   # long slasher
    KNIFE = 5   # short, slash and stab


class ToolForm(IntEnum):
    NULL = 0
    HARP = 1
    STAFF = 2
    SWORD = 3
    KNIFE = 4
    CUBE = 5


class ArmorForm(IntEnum):
    NULL = 0
    ROBE = 1
    COAT = 2
    MASK = 3
    HELM = 4
    GLOVES = 5
    BOOTS = 6
    RING = 7


class ArmorMod(IntEnum):
    NULL = 0
    LIGHT = 1
    BULKY = 2
    POCKETED = 3
    FURRED = 4
    PADDED = 5
    PLATED = 6


class BodyPart(IntFlag):
    NONE = 0
    TORSO = 1 << 0
    HEAD = 1 << 1
    EYES = 1 << 2
    MOUTH = 1 << 3
    ARM_L = 1 << 4
    ARM_R = 1 << 5
    HAND_L = 1 << 6
    HAND_R = 1 << 7
    LEG_L = 1 << 8
    LEG_R = 1 << 9
    FOOT_L = 1 << 10
    FOOT_R = 1 << 11


ALL_BODY_PARTS = BodyPart((1 << 12) - 1)


# ----------------- Static data -----------------

@dataclass(frozen=True)
class ShapeDatum:
    name: str
    desc: str
    volume_min: int   # ml
    volume_max: int
    weight_min: int   # g
    weight_max: int


@dataclass(frozen=True)
class PropertyDatum:
    """
    Flavor of a natural artifact plus hinted effects.

    The four hint slots per family are suggestions for the natural sampler;
    NULL slots force a uniform pick from the family's sub-range.
    """
    name: str
    desc: str
    passive_good: Tuple[PassiveEffect, PassiveEffect, PassiveEffect, PassiveEffect]
    passive_bad: Tuple[PassiveEffect, PassiveEffect, PassiveEffect, PassiveEffect]
    active_good: Tuple[ActiveEffect, ActiveEffect, ActiveEffect, ActiveEffect]
    active_bad: Tuple[ActiveEffect, ActiveEffect, ActiveEffect, ActiveEffect]


@dataclass(frozen=True)
class WeaponDatum:
    adjective: str
    volume: int       # ml, only added for an *extra* weapon
    weight: int       # g, only added for an *extra* weapon
    bash_min: int
    bash_max: int
    cut_min: int
    cut_max: int
    stab_min: int
    stab_max: int
    to_hit_min: int
    to_hit_max: int
    tag: str = ""


@dataclass(frozen=True)
class ToolFormDatum:
    name: str
    sym: str
    color: str
    material: str
    volume_min: int
    volume_max: int
    weight_min: int
    weight_max: int
    base_weapon: WeaponType
    extra_weapons: Tuple[WeaponType, WeaponType, WeaponType]


@dataclass(frozen=True)
class ArmorFormDatum:
    name: str
    color: str
    material: str
    volume: int
    weight: int
    encumber: int
    coverage: int
    thickness: int
    env_resist: int
    warmth: int
    storage: int
    melee_bash: int
    melee_cut: int
    melee_hit: int
    covers: BodyPart
    plural: bool
    available_mods: Tuple[ArmorMod, ArmorMod, ArmorMod, ArmorMod, ArmorMod]


@dataclass(frozen=True)
class ArmorModDatum:
    """Deltas applied on top of an armor form. ``name`` completes "It is ..."."""
    name: str
    material: str
    volume: int
    weight: int
    encumber: int
    coverage: int
    thickness: int
    env_resist: int
    warmth: int
    storage: int


# ----------------- Generated records -----------------

TOOL_TYPE = "artifact_tool"
ARMOR_TYPE = "artifact_armor"


@dataclass
class ArtifactCommon:
    """Fields every artifact carries regardless of variant."""
    id: str = ""
    name: str = ""
    description: str = ""
    sym: str = "*"
    color: str = "white"
    price: int = 0
    materials: List[str] = field(default_factory=list)
    volume: int = 0        # ml
    weight: int = 0        # g
    melee_bash: int = 0
    melee_cut: int = 0
    melee_stab: int = 0
    m_to_hit: int = 0
    item_flags: List[str] = field(default_factory=list)
    techniques: List[str] = field(default_factory=list)

    def add_flag(self, flag: str) -> None:
        if flag and flag not in self.item_flags:
            self.item_flags.append(flag)


@dataclass
class ToolFields:
    ammo: str = "NULL"
    max_charges: int = 0
    def_charges: int = 0
    charges_per_use: int = 1
    turns_per_charge: int = 0
    revert_to: str = "null"
    charge_type: ChargeType = ChargeType.NULL
    effects_wielded: List[PassiveEffect] = field(default_factory=list)
    effects_carried: List[PassiveEffect] = field(default_factory=list)
    effects_activated: List[ActiveEffect] = field(default_factory=list)


@dataclass
class ArmorFields:
    covers: BodyPart = BodyPart.NONE
    encumber: int = 0
    coverage: int = 0
    thickness: int = 0
    env_resist: int = 0
    warmth: int = 0
    storage: int = 0       # ml
    power_armor: bool = False
    plural: bool = False
    effects_worn: List[PassiveEffect] = field(default_factory=list)


@dataclass
class ArtifactTool:
    common: ArtifactCommon = field(default_factory=ArtifactCommon)
    tool: ToolFields = field(default_factory=ToolFields)
    type: str = field(default=TOOL_TYPE, init=False)


@dataclass
class ArtifactArmor:
    common: ArtifactCommon = field(default_factory=ArtifactCommon)
    armor: ArmorFields = field(default_factory=ArmorFields)
    type: str = field(default=ARMOR_TYPE, init=False)


ArtifactRecord = Union[ArtifactTool, ArtifactArmor]


def record_effects(record: ArtifactRecord) -> List[Union[PassiveEffect, ActiveEffect]]:
    """Every effect listed on the record, in list order."""
    if record.type == TOOL_TYPE:
        return [
            *record.tool.effects_wielded,
            *record.tool.effects_carried,
            *record.tool.effects_activated,
        ]
    return list(record.armor.effects_worn)
