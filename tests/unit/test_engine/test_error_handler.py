"""
Unit tests for the error types and error logging.
"""

import logging

from engine.error_handler import (
    ArtifactError,
    ArtifactLoadError,
    ValidationError,
    log_error,
    logger,
)


class TestErrors:
    """Tests for the exception taxonomy."""

    def test_user_message_defaults_to_message(self):
        error = ArtifactError("boom")
        assert error.user_message == "boom"
        assert ArtifactError("boom", "Something broke").user_message == "Something broke"

    def test_load_error_names_field(self):
        error = ArtifactLoadError("missing required field", field="name")
        assert error.field == "name"
        assert str(error) == "missing required field (field 'name')"
        assert isinstance(error, ArtifactError)

    def test_load_error_without_field(self):
        error = ArtifactLoadError("not valid JSON")
        assert error.field is None
        assert str(error) == "not valid JSON"

    def test_validation_error_is_artifact_error(self):
        assert issubclass(ValidationError, ArtifactError)


class TestLogError:
    """Tests for log_error()."""

    def test_logs_with_context(self, caplog):
        with caplog.at_level(logging.ERROR, logger=logger.name):
            try:
                raise OSError("disk full")
            except OSError as e:
                log_error(e, "save_artifacts")

        assert "Error in save_artifacts: OSError: disk full" in caplog.text
