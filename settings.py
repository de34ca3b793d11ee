# settings.py

import os
from pathlib import Path

# Root for runtime files (logs, config, saves). Override with ARTIFACTS_HOME.
PROJECT_ROOT = Path(os.environ.get("ARTIFACTS_HOME", Path(__file__).resolve().parent))

CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT / "logs"
SAVE_DIR = PROJECT_ROOT / "saves"

# Files
ARTIFACT_CONFIG_FILE = CONFIG_DIR / "artifact_settings.json"
ARTIFACT_SAVE_FILE = SAVE_DIR / "artifacts.json"
TELEMETRY_FILE = LOG_DIR / "telemetry.jsonl"

# Logging
LOGGER_NAME = "artifacts"
CONSOLE_LOG_LEVEL = "WARNING"
