from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences (prompt, diagram markers,
seed file, diagnostics) as JSON in the user data directory, with default
fallback when the file is missing or corrupt. The virtual tree itself is
never persisted.
"""

import json
import logging
import os
from typing import Any, Dict

from cmdchallenge.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_MARKER_STYLE
from cmdchallenge.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
DEFAULT_PROMPT_TEMPLATE = "{cwd} $ "
DEFAULT_HISTORY_LIMIT = 100


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Seeding
        "seed_path": "",

        # Presentation
        "prompt_template": DEFAULT_PROMPT_TEMPLATE,
        "marker_style": DEFAULT_MARKER_STYLE,

        # Session
        "history_limit": DEFAULT_HISTORY_LIMIT,

        # Diagnostics
        "log_level": "INFO",
        "log_to_file": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the stored configuration merged over the defaults.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    defaults = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    defaults.update({k: v for k, v in data.items() if k in defaults})
    return defaults


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True when the file was written.
    """
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
    logger.debug(f"Configuration saved to {CONFIG_FILE}")
    return True
