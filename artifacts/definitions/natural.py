"""
Natural artifact shapes and properties.

A natural artifact is named "<property> <shape>", e.g. "glowing sphere".
Index 0 of each table is the NULL placeholder and is never picked.
"""

from typing import Tuple

from ..effects import ActiveEffect as A
from ..effects import PassiveEffect as P
from ..types import PropertyDatum, ShapeDatum


SHAPE_DATA: Tuple[ShapeDatum, ...] = (
    ShapeDatum("BUG", "BUG", 0, 0, 0, 0),
    # name, desc, volume min/max (ml), weight min/max (g)
    ShapeDatum("sphere", "smooth sphere", 500, 1000, 1, 1150),
    ShapeDatum("rod", "tapered rod", 250, 1750, 1, 800),
    ShapeDatum("teardrop", "teardrop-shaped stone", 500, 1500, 1, 950),
    ShapeDatum("lamp", "hollow, transparent cube", 1000, 225, 1, 350),
    ShapeDatum("snake", "winding, flexible rod", 0, 2000, 1, 950),
    ShapeDatum("disc", "smooth disc", 1000, 1500, 200, 400),
    ShapeDatum("beads", "string of beads", 750, 1750, 1, 700),
    ShapeDatum("napkin", "very thin sheet", 0, 750, 1, 350),
    ShapeDatum("urchin", "spiked sphere", 750, 1250, 200, 700),
    ShapeDatum("jelly", "malleable blob", 500, 2000, 200, 450),
    ShapeDatum("spiral", "spiraling rod", 1250, 1500, 200, 350),
    ShapeDatum("pin", "pointed rod", 250, 1250, 100, 1050),
    ShapeDatum("tube", "hollow tube", 500, 1250, 350, 700),
    ShapeDatum("pyramid", "regular tetrahedron", 750, 1750, 200, 450),
    ShapeDatum("crystal", "translucent crystal", 250, 1500, 200, 800),
    ShapeDatum("knot", "twisted, knotted cord", 500, 1500, 100, 800),
    ShapeDatum("crescent", "crescent-shaped stone", 500, 1500, 200, 700),
)


PROPERTY_DATA: Tuple[PropertyDatum, ...] = (
    PropertyDatum(
        "BUG", "BUG",
        (P.NULL, P.NULL, P.NULL, P.NULL),
        (P.NULL, P.NULL, P.NULL, P.NULL),
        (A.NULL, A.NULL, A.NULL, A.NULL),
        (A.NULL, A.NULL, A.NULL, A.NULL),
    ),
    PropertyDatum(
        "wriggling", "is constantly wriggling",
        (P.SPEED_UP, P.SNAKES, P.NULL, P.NULL),
        (P.DEX_DOWN, P.FORCE_TELEPORT, P.SICK, P.NULL),
        (A.TELEPORT, A.ADRENALINE, A.NULL, A.NULL),
        (A.MUTATE, A.ATTENTION, A.VOMIT, A.NULL),
    ),
    PropertyDatum(
        "glowing", "glows faintly",
        (P.INT_UP, P.GLOW, P.CLAIRVOYANCE, P.NULL),
        (P.RADIOACTIVE, P.MUTAGENIC, P.ATTENTION, P.NULL),
        (A.LIGHT, A.LIGHT, A.LIGHT, A.NULL),
        (A.ATTENTION, A.TELEGLOW, A.FLASH, A.SHADOWS),
    ),
    PropertyDatum(
        "humming", "hums very quietly",
        (P.ALL_UP, P.PSYSHIELD, P.NULL, P.NULL),
        (P.SCHIZO, P.PER_DOWN, P.INT_DOWN, P.NULL),
        (A.PULSE, A.ENTRANCE, A.NULL, A.NULL),
        (A.NOISE, A.NOISE, A.SCREAM, A.NULL),
    ),
    PropertyDatum(
        "moving", "shifts from side to side slowly",
        (P.STR_UP, P.DEX_UP, P.SPEED_UP, P.NULL),
        (P.HUNGER, P.PER_DOWN, P.FORCE_TELEPORT, P.NULL),
        (A.TELEPORT, A.TELEPORT, A.MAP, A.NULL),
        (A.PARALYZE, A.VOMIT, A.VOMIT, A.NULL),
    ),
    PropertyDatum(
        "whispering", "makes very faint whispering sounds",
        (P.CLAIRVOYANCE, P.EXTINGUISH, P.STEALTH, P.NULL),
        (P.EVIL, P.SCHIZO, P.ATTENTION, P.NULL),
        (A.FATIGUE, A.ENTRANCE, A.ENTRANCE, A.NULL),
        (A.ATTENTION, A.SCREAM, A.SCREAM, A.SHADOWS),
    ),
    PropertyDatum(
        "breathing",
        "shrinks and grows very slightly with a regular pulse, as if breathing",
        (P.SAP_LIFE, P.ALL_UP, P.SPEED_UP, P.CARRY_MORE),
        (P.HUNGER, P.THIRST, P.SICK, P.BAD_WEATHER),
        (A.ADRENALINE, A.HEAL, A.ENTRANCE, A.GROWTH),
        (A.MUTATE, A.ATTENTION, A.SHADOWS, A.NULL),
    ),
    PropertyDatum(
        "dead", "is icy cold to the touch",
        (P.INVISIBLE, P.CLAIRVOYANCE, P.EXTINGUISH, P.SAP_LIFE),
        (P.HUNGER, P.EVIL, P.ALL_DOWN, P.SICK),
        (A.BLOOD, A.HURTALL, A.NULL, A.NULL),
        (A.PAIN, A.SHADOWS, A.DIM, A.VOMIT),
    ),
    PropertyDatum(
        "itchy", "makes your skin itch slightly when it is close",
        (P.DEX_UP, P.SPEED_UP, P.PSYSHIELD, P.NULL),
        (P.RADIOACTIVE, P.MUTAGENIC, P.SICK, P.NULL),
        (A.ADRENALINE, A.BLOOD, A.HEAL, A.BUGS),
        (A.RADIATION, A.PAIN, A.PAIN, A.VOMIT),
    ),
    PropertyDatum(
        "glittering", "glitters faintly under direct light",
        (P.INT_UP, P.EXTINGUISH, P.GLOW, P.NULL),
        (P.SMOKE, P.ATTENTION, P.NULL, P.NULL),
        (A.MAP, A.LIGHT, A.CONFUSED, A.ENTRANCE),
        (A.RADIATION, A.MUTATE, A.ATTENTION, A.FLASH),
    ),
    PropertyDatum(
        "electric", "very weakly shocks you when touched",
        (P.RESIST_ELECTRICITY, P.DEX_UP, P.SPEED_UP, P.PSYSHIELD),
        (P.THIRST, P.SMOKE, P.STR_DOWN, P.BAD_WEATHER),
        (A.STORM, A.ADRENALINE, A.LIGHT, A.NULL),
        (A.PAIN, A.PARALYZE, A.FLASH, A.FLASH),
    ),
    PropertyDatum(
        "slimy", "feels slimy",
        (P.SNAKES, P.STEALTH, P.EXTINGUISH, P.SAP_LIFE),
        (P.THIRST, P.DEX_DOWN, P.SPEED_DOWN, P.SICK),
        (A.BLOOD, A.ACIDBALL, A.GROWTH, A.ACIDBALL),
        (A.MUTATE, A.MUTATE, A.VOMIT, A.VOMIT),
    ),
    PropertyDatum(
        "engraved", "is covered with odd etchings",
        (P.CLAIRVOYANCE, P.INVISIBLE, P.PSYSHIELD, P.SAP_LIFE),
        (P.EVIL, P.ATTENTION, P.NULL, P.NULL),
        (A.FATIGUE, A.TELEPORT, A.HEAL, A.FATIGUE),
        (A.ATTENTION, A.ATTENTION, A.TELEGLOW, A.DIM),
    ),
    PropertyDatum(
        "crackling", "occasionally makes a soft crackling sound",
        (P.EXTINGUISH, P.RESIST_ELECTRICITY, P.NULL, P.NULL),
        (P.SMOKE, P.RADIOACTIVE, P.MOVEMENT_NOISE, P.NULL),
        (A.STORM, A.FIREBALL, A.PULSE, A.NULL),
        (A.PAIN, A.PARALYZE, A.NOISE, A.NOISE),
    ),
    PropertyDatum(
        "warm", "is warm to the touch",
        (P.STR_UP, P.EXTINGUISH, P.GLOW, P.NULL),
        (P.SMOKE, P.RADIOACTIVE, P.NULL, P.NULL),
        (A.FIREBALL, A.FIREBALL, A.FIREBALL, A.LIGHT),
        (A.FIRESTORM, A.FIRESTORM, A.TELEGLOW, A.NULL),
    ),
    PropertyDatum(
        "rattling", "makes a rattling sound when moved",
        (P.DEX_UP, P.SPEED_UP, P.SNAKES, P.CARRY_MORE),
        (P.ATTENTION, P.INT_DOWN, P.MOVEMENT_NOISE, P.MOVEMENT_NOISE),
        (A.BLOOD, A.PULSE, A.BUGS, A.NULL),
        (A.PAIN, A.ATTENTION, A.NOISE, A.NULL),
    ),
    PropertyDatum(
        "scaled", "has a surface reminiscent of reptile scales",
        (P.SNAKES, P.SNAKES, P.SNAKES, P.STEALTH),
        (P.THIRST, P.MUTAGENIC, P.SPEED_DOWN, P.NULL),
        (A.ADRENALINE, A.BUGS, A.GROWTH, A.NULL),
        (A.MUTATE, A.SCREAM, A.DIM, A.NULL),
    ),
    PropertyDatum(
        "fractal",
        "has a self-similar pattern which repeats until it is too small for you to see",
        (P.ALL_UP, P.ALL_UP, P.CLAIRVOYANCE, P.PSYSHIELD),
        (P.SCHIZO, P.ATTENTION, P.FORCE_TELEPORT, P.BAD_WEATHER),
        (A.STORM, A.FATIGUE, A.TELEPORT, A.NULL),
        (A.RADIATION, A.MUTATE, A.TELEGLOW, A.TELEGLOW),
    ),
)
