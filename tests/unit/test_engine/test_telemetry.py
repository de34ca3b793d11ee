"""
Unit tests for the telemetry event log.
"""

from telemetry.logger import TelemetryLogger, read_events


class TestTelemetryLogger:
    """Tests for TelemetryLogger."""

    def test_writes_json_lines(self, tmp_path):
        path = tmp_path / "logs" / "telemetry.jsonl"
        logger = TelemetryLogger()
        logger.init(path)
        logger.log("artifact_generated", id="artifact_0", power=3)

        rows = read_events(path)
        assert [row["event"] for row in rows] == ["telemetry_init", "artifact_generated"]
        assert rows[1]["id"] == "artifact_0"
        assert rows[1]["power"] == 3
        assert "ts" in rows[1] and "t" in rows[1]
        assert logger.events_written == 2
        assert logger.event_counts["artifact_generated"] == 1

    def test_filter_by_event(self, tmp_path):
        path = tmp_path / "telemetry.jsonl"
        logger = TelemetryLogger()
        logger.init(path)
        logger.log("artifact_generated", id="artifact_0")
        logger.log("artifacts_saved", count=1)
        assert [row["event"] for row in read_events(path, "artifacts_saved")] == ["artifacts_saved"]

    def test_appends(self, tmp_path):
        path = tmp_path / "telemetry.jsonl"
        TelemetryLogger().init(path)
        TelemetryLogger().init(path)
        assert len(read_events(path)) == 2

    def test_disabled(self, tmp_path):
        path = tmp_path / "telemetry.jsonl"
        logger = TelemetryLogger(path=path, enabled=False)
        logger.log("artifact_generated")
        assert not path.exists()
        assert logger.events_written == 0

    def test_uninitialized_is_noop(self, tmp_path):
        logger = TelemetryLogger()
        logger.log("artifact_generated")
        assert logger.events_written == 0
        assert read_events(tmp_path / "missing.jsonl") == []
