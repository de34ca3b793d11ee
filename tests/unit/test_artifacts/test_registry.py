"""
Unit tests for the artifact registry.
"""

import pytest
from artifacts.registry import (
    ARTIFACT_TYPES,
    create_artifact_id,
    get_artifact,
    is_runtime_artifact,
    register_artifact,
    runtime_artifacts,
)
from artifacts.types import ArtifactArmor, ArtifactCommon, ArtifactTool


class TestRegistry:
    """Tests for registering artifacts."""

    def test_ids_are_sequential(self):
        assert create_artifact_id() == "artifact_0"
        assert create_artifact_id() == "artifact_1"

    def test_register_assigns_id(self):
        record = ArtifactTool()
        artifact_id = register_artifact(record)
        assert record.common.id == artifact_id
        assert get_artifact(artifact_id) is record

    def test_register_keeps_existing_id(self):
        record = ArtifactArmor(common=ArtifactCommon(id="artifact_0"))
        register_artifact(record)
        # the next generated id skips the one already taken
        assert register_artifact(ArtifactTool()) == "artifact_1"

    def test_runtime_flag(self):
        static_id = register_artifact(ArtifactTool(), runtime=False)
        runtime_id = register_artifact(ArtifactTool())
        assert not is_runtime_artifact(static_id)
        assert is_runtime_artifact(runtime_id)
        assert [r.common.id for r in runtime_artifacts()] == [runtime_id]

    def test_unknown_id(self):
        with pytest.raises(KeyError):
            get_artifact("artifact_404")

    def test_registry_starts_empty(self):
        assert ARTIFACT_TYPES == {}
