"""
Centralized error handling and logging for artifact generation.

This module provides:
- The shared "artifacts" logger (daily file log + console warnings)
- Exception types for the different error categories
- log_error() for reporting failures that are returned rather than raised
"""
import logging
import traceback
from datetime import datetime
from typing import Optional

from settings import CONSOLE_LOG_LEVEL, LOG_DIR, LOGGER_NAME

LOG_DIR.mkdir(parents=True, exist_ok=True)

# Configure logger
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.DEBUG)

# Prevent duplicate handlers
if not logger.handlers:
    # File handler for detailed logs
    log_file = LOG_DIR / f"artifacts_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(CONSOLE_LOG_LEVEL)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)


class ArtifactError(Exception):
    """Base exception for artifact errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class ArtifactLoadError(ArtifactError):
    """Malformed artifact data read from a save file."""
    def __init__(self, message: str, field: Optional[str] = None):
        if field is not None:
            message = f"{message} (field '{field}')"
        super().__init__(message, user_message="The artifact file is corrupted.")
        self.field = field


class ValidationError(ArtifactError):
    """Static artifact tables are inconsistent."""
    pass


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "save_artifacts")
    """
    error_type = type(error).__name__
    trace = traceback.format_exc()

    logger.error(f"Error in {context}: {error_type}: {error}\n{trace}")
