"""
Procedural artifact generation.

Generated artifacts are registered in artifacts.registry and persisted by
engine.utils.save_system. The static tables are checked on import.
"""

from .generation import (
    generate_fixed_debug_artifact,
    generate_natural_artifact,
    generate_random_artifact,
)
from .registry import get_artifact, runtime_artifacts
from .rng import ArtifactRng, seed_shared_rng
from .validation import ensure_valid

ensure_valid()

__all__ = [
    "ArtifactRng",
    "generate_fixed_debug_artifact",
    "generate_natural_artifact",
    "generate_random_artifact",
    "get_artifact",
    "runtime_artifacts",
    "seed_shared_rng",
]
