from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime configuration for the command-line entry point, with
optional loading from a JSON file. The traversal core itself takes plain
arguments and never reads configuration.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dirfind.domain.constants import DEFAULT_ON_ERROR

logger = logging.getLogger(__name__)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "root_path": os.getcwd(),

        # File selection
        "extensions": [],
        "include_patterns": [],
        "exclude_patterns": [],

        # Directory selection
        "exclude_dir_patterns": [],
        "use_default_excludes": False,

        # Traversal behaviour
        "on_error": DEFAULT_ON_ERROR,
        "detect_cycles": False,
    }


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """
    Load configuration values from a JSON file on top of the defaults.

    A missing, unreadable or malformed file is reported and ignored.

    Args:
        path: Path to a JSON object file, or None for defaults only.

    Returns:
        Dict[str, Any]: Defaults updated with the file's values.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file '{path}' not found. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not hold a JSON object. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Loaded {len(data)} config keys from '{path}'")
    return config
