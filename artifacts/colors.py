"""
Artifact display colors.

Records store a color *name* (saved as-is); renderers turn it into a
pygame.Color here.
"""

from __future__ import annotations

from typing import Tuple

import pygame

from .types import ArtifactRecord

FALLBACK_COLOR = "white"


def is_known_color(name: str) -> bool:
    try:
        pygame.Color(name)
    except ValueError:
        return False
    return True


def color_for_name(name: str) -> pygame.Color:
    """Resolve a color name, falling back to white for unknown names."""
    if not is_known_color(name):
        name = FALLBACK_COLOR
    return pygame.Color(name)


def artifact_color(record: ArtifactRecord) -> pygame.Color:
    return color_for_name(record.common.color)


def artifact_rgb(record: ArtifactRecord) -> Tuple[int, int, int]:
    color = artifact_color(record)
    return (color.r, color.g, color.b)
