"""
Artifact registry.

Holds every artifact type known to the running game, keyed by id. Artifacts
registered as runtime (generated or loaded from a save) are the only ones
written back out by the save system; static ones ship with the game.
"""

from typing import Dict, List, Set

from .types import ArtifactRecord


# Global registries
ARTIFACT_TYPES: Dict[str, ArtifactRecord] = {}
_RUNTIME_IDS: Set[str] = set()
_next_artifact_number = 0


def create_artifact_id() -> str:
    """Return a fresh "artifact_N" id not used by any registered artifact."""
    global _next_artifact_number
    while True:
        candidate = f"artifact_{_next_artifact_number}"
        _next_artifact_number += 1
        if candidate not in ARTIFACT_TYPES:
            return candidate


def register_artifact(record: ArtifactRecord, runtime: bool = True) -> str:
    """
    Register an artifact, assigning an id if it doesn't have one yet.

    The registry takes ownership; callers should not mutate the record
    afterwards.
    """
    if not record.common.id:
        record.common.id = create_artifact_id()
    ARTIFACT_TYPES[record.common.id] = record
    if runtime:
        _RUNTIME_IDS.add(record.common.id)
    else:
        _RUNTIME_IDS.discard(record.common.id)
    return record.common.id


def get_artifact(artifact_id: str) -> ArtifactRecord:
    """Get an artifact by ID."""
    return ARTIFACT_TYPES[artifact_id]


def is_runtime_artifact(artifact_id: str) -> bool:
    return artifact_id in _RUNTIME_IDS


def runtime_artifacts() -> List[ArtifactRecord]:
    """Runtime artifacts in registration order."""
    return [rec for art_id, rec in ARTIFACT_TYPES.items() if art_id in _RUNTIME_IDS]


def clear_registry() -> None:
    global _next_artifact_number
    ARTIFACT_TYPES.clear()
    _RUNTIME_IDS.clear()
    _next_artifact_number = 0
