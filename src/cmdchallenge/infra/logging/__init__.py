from __future__ import annotations

from .config import DEFAULT_LOG_FILE_NAME, LoggingConfig
from .core import (
    configure_logging,
    get_default_log_path,
    get_logger,
    get_recent_logs,
)

__all__ = [
    "DEFAULT_LOG_FILE_NAME",
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "get_recent_logs",
    "get_default_log_path",
]
