"""
Artifact configuration loader.

Loads runtime settings (where artifacts are saved, default seed, telemetry)
from a JSON config file, falling back to defaults.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from settings import ARTIFACT_CONFIG_FILE, ARTIFACT_SAVE_FILE, TELEMETRY_FILE

from .error_handler import logger


@dataclass
class ArtifactConfig:
    """Runtime configuration for artifact generation and persistence."""
    save_file: str = str(ARTIFACT_SAVE_FILE)
    seed: Optional[int] = None
    telemetry_enabled: bool = True
    telemetry_file: str = str(TELEMETRY_FILE)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for saving."""
        return {
            "save_file": self.save_file,
            "seed": self.seed,
            "telemetry_enabled": self.telemetry_enabled,
            "telemetry_file": self.telemetry_file,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Load config from dictionary."""
        self.save_file = data.get("save_file", self.save_file)
        self.seed = data.get("seed", self.seed)
        self.telemetry_enabled = data.get("telemetry_enabled", self.telemetry_enabled)
        self.telemetry_file = data.get("telemetry_file", self.telemetry_file)

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "ArtifactConfig":
        """
        Load configuration from file, using defaults if file doesn't exist.

        Args:
            config_file: Optional path to config file (defaults to standard location)

        Returns:
            ArtifactConfig instance
        """
        if config_file is None:
            config_file = ARTIFACT_CONFIG_FILE

        config = cls()

        if not config_file.exists():
            logger.info(f"Artifact config file not found at {config_file}, using defaults.")
            # Save default config file
            config.save(config_file)
            return config

        try:
            with config_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
            config.from_dict(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading artifact config: {e}. Using default configuration.")
            return cls()

        return config

    def save(self, config_file: Optional[Path] = None) -> bool:
        """
        Save configuration to file.

        Returns:
            True if saved successfully, False otherwise
        """
        if config_file is None:
            config_file = ARTIFACT_CONFIG_FILE

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with config_file.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Error saving artifact config: {e}")
            return False


# Global config instance
_config: Optional[ArtifactConfig] = None


def get_config() -> ArtifactConfig:
    """Get the global config instance, loading it on first use."""
    global _config
    if _config is None:
        _config = ArtifactConfig.load()
    return _config
