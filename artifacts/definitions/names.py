"""
Word lists for tool / armor artifact names.

A noun template is filled with an adjective ("%s Dreams" + "Forbidden"),
then attached to the form: "Harp of Forbidden Dreams".
"""

from typing import Tuple


ARTIFACT_ADJECTIVES: Tuple[str, ...] = (
    "Forbidden", "Unknown", "Forgotten", "Hideous", "Eldritch",
    "Gelatinous", "Ancient", "Cursed", "Bloody", "Undying",
    "Shadowy", "Silent", "Cyclopean", "Fungal", "Unspeakable",
    "Grotesque", "Frigid", "Shattered", "Sleeping", "Repellent",
)

ARTIFACT_NOUNS: Tuple[str, ...] = (
    "%s Technique", "%s Dreams", "%s Beasts", "%s Evil", "%s Miasma",
    "the %s Abyss", "the %s City", "%s Shadows", "%s Shade", "%s Illusion",
    "%s Justice", "the %s Necropolis", "%s Ichor", "the %s Monolith", "%s Aeons",
    "%s Graves", "%s Horrors", "%s Suffering", "%s Death", "%s Horror",
)
