"""
Static artifact content tables.

Structure:
- natural.py: shapes and properties for natural (found) artifacts
- tools.py:   weapon archetypes and tool forms
- armor.py:   armor forms and armor mods
- names.py:   adjective / noun word lists for generated names

Tables are tuples indexed by the matching IntEnum in ..types.
"""

from .armor import ARMOR_FORM_DATA, ARMOR_MOD_DATA
from .names import ARTIFACT_ADJECTIVES, ARTIFACT_NOUNS
from .natural import PROPERTY_DATA, SHAPE_DATA
from .tools import TOOL_FORM_DATA, WEAPON_DATA

__all__ = [
    "ARMOR_FORM_DATA",
    "ARMOR_MOD_DATA",
    "ARTIFACT_ADJECTIVES",
    "ARTIFACT_NOUNS",
    "PROPERTY_DATA",
    "SHAPE_DATA",
    "TOOL_FORM_DATA",
    "WEAPON_DATA",
]
