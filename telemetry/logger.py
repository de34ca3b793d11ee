from __future__ import annotations

import json
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


def _timestamp() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


@dataclass
class TelemetryLogger:
    """
    Append-only JSON-lines event log.

    Generation writes one ``artifact_generated`` row per artifact; the save
    system writes ``artifacts_saved`` / ``artifacts_loaded``.
    """
    path: Optional[Path] = None
    enabled: bool = True
    flush_each_write: bool = False
    event_counts: Counter = field(default_factory=Counter)

    @property
    def events_written(self) -> int:
        return sum(self.event_counts.values())

    def init(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)
        self.log("telemetry_init", file=str(self.path))

    def log(self, event: str, **fields: Any) -> None:
        if not self.enabled or self.path is None:
            return

        row: Dict[str, Any] = {"t": time.time(), "ts": _timestamp(), "event": event}
        row.update(fields)

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
                if self.flush_each_write:
                    f.flush()
        except OSError:
            # Telemetry must never break generation.
            return
        self.event_counts[event] += 1


def read_events(path: Path, event: Optional[str] = None) -> List[Dict[str, Any]]:
    """Rows of a telemetry file, optionally only those of one event type."""
    if not path.exists():
        return []
    rows = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            row = json.loads(line)
            if event is None or row.get("event") == event:
                rows.append(row)
    return rows


# global singleton (easy import everywhere)
telemetry = TelemetryLogger()
