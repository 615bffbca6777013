from __future__ import annotations

"""
Diagnostics Settings for the Shell.

The shell writes its own output to stdout and command errors to stderr, so
diagnostics must stay out of the way: the console stream carries a short,
program-prefixed line and the optional rotating file under the user data
directory carries the full record. LoggingConfig.from_settings() derives
these settings from the validated application configuration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# Accepted 'log_level' values and their numeric levels
LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_LOG_LEVEL = "INFO"
LOG_DIR_NAME = "logs"
DEFAULT_LOG_FILE_NAME = "cmdchallenge.log"


def parse_level(level: Optional[str]) -> int:
    """Map a level name onto its logging constant, falling back to INFO."""
    if not level:
        return logging.INFO
    return LOG_LEVELS.get(str(level).strip().upper(), logging.INFO)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one shell run.

    Attributes:
        level: Minimum level name, one of LOG_LEVELS.
        console: Mirror diagnostics on stderr next to command errors.
        log_file: Rotating log file, or None to keep diagnostics console-only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept beside the active one.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file records.
        datefmt: Timestamp format of log file records.
    """
    level: str = DEFAULT_LOG_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 256 * 1024
    backup_count: int = 2

    console_fmt: str = "cmdchallenge: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_number(self) -> int:
        return parse_level(self.level)

    @classmethod
    def from_settings(
            cls,
            settings: Mapping[str, Any],
            log_file: Optional[str] = None,
    ) -> "LoggingConfig":
        """
        Build the settings from a validated application configuration.

        Args:
            settings: Configuration with 'log_level' and 'log_to_file'.
            log_file: Where file records go when 'log_to_file' is set.

        Returns:
            LoggingConfig: Console logging always on; the file only when
            requested and a path is known.
        """
        to_file = bool(settings.get("log_to_file", False))
        return cls(
            level=str(settings.get("log_level") or DEFAULT_LOG_LEVEL).upper(),
            console=True,
            log_file=log_file if to_file else None,
        )
