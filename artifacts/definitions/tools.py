"""
Weapon archetypes and tool forms for tool artifacts.

Every tool form has a base weapon whose melee ranges are rolled, plus up to
three extra weapons one of which may be bolted on ("Spiked Harp").
"""

from typing import Tuple

from ..types import ToolFormDatum, WeaponDatum, WeaponType as W


WEAPON_DATA: Tuple[WeaponDatum, ...] = (
    WeaponDatum("", 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    # adjective, vol, wgt, bash min/max, cut min/max, stab min/max, to-hit min/max, tag
    WeaponDatum("Heavy", 0, 1400, 10, 20, 0, 0, 0, 0, -2, 0),
    WeaponDatum("Knobbed", 250, 250, 14, 30, 0, 0, 0, 0, -1, 1),
    WeaponDatum("Spiked", 250, 100, 0, 0, 0, 0, 20, 40, -1, 1),
    WeaponDatum("Edged", 500, 450, 0, 0, 20, 50, 0, 0, -1, 2, "SHEATH_SWORD"),
    WeaponDatum("Bladed", 250, 2250, 0, 0, 0, 0, 12, 30, -1, 1, "SHEATH_KNIFE"),
)


TOOL_FORM_DATA: Tuple[ToolFormDatum, ...] = (
    ToolFormDatum(
        "", "*", "white", "null", 0, 0, 0, 0, W.BULK,
        (W.NULL, W.NULL, W.NULL),
    ),
    ToolFormDatum(
        "Harp", ";", "yellow", "wood", 5000, 7500, 1150, 2100, W.BULK,
        (W.SPEAR, W.SWORD, W.KNIFE),
    ),
    ToolFormDatum(
        "Staff", "/", "brown", "wood", 1500, 3000, 450, 1150, W.CLUB,
        (W.BULK, W.SPEAR, W.KNIFE),
    ),
    ToolFormDatum(
        "Sword", "/", "lightblue", "steel", 2000, 3500, 900, 3259, W.SWORD,
        (W.BULK, W.NULL, W.NULL),
    ),
    ToolFormDatum(
        "Dagger", ";", "lightblue", "steel", 250, 1000, 100, 700, W.KNIFE,
        (W.NULL, W.NULL, W.NULL),
    ),
    ToolFormDatum(
        "Cube", "*", "white", "steel", 250, 750, 100, 2300, W.BULK,
        (W.SPEAR, W.NULL, W.NULL),
    ),
)
