from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent user configuration stored as JSON in the
application data directory, with fallback to built-in defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from design_tokens.domain.constants import DEFAULT_OUTPUT_DIR
from design_tokens.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "output_dir": DEFAULT_OUTPUT_DIR,
        "output_references": True,
        "log_level": "INFO",
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(create=False), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: str = "") -> Dict[str, Any]:
    """
    Load the user configuration merged over the defaults.

    A missing file yields the defaults; a corrupted one is reported and
    ignored.

    Args:
        config_path: Optional explicit location of the JSON file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    defaults = get_default_config()
    path = config_path or get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return defaults

    defaults.update({k: v for k, v in data.items() if k in defaults})
    return defaults


def save_config(config: Dict[str, Any], config_path: str = "") -> None:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        config_path: Optional explicit location of the JSON file.
    """
    path = config_path or get_config_path()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
