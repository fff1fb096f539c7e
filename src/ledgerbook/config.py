"""Environment-driven settings for ledgerbook."""

import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Values come from LEDGERBOOK_* environment variables; CLI options take
    precedence over them.
    """

    log_level: str = "WARNING"
    log_format: str = "console"
    rules_path: Optional[str] = None


def get_settings() -> Settings:
    """Read settings from the environment.

    Returns:
        Settings instance

    Raises:
        ValueError: If the log level or log format is not recognized
    """
    log_level = os.environ.get("LEDGERBOOK_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{log_level}'. Supported levels: {', '.join(LOG_LEVELS)}"
        )

    log_format = os.environ.get("LEDGERBOOK_LOG_FORMAT", "console").strip().lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"Unknown log format '{log_format}'. Supported formats: {', '.join(LOG_FORMATS)}"
        )

    rules_path = os.environ.get("LEDGERBOOK_RULES_PATH") or None
    return Settings(log_level=log_level, log_format=log_format, rules_path=rules_path)
