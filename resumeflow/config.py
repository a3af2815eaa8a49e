"""
YAML configuration loading.

The configuration file is optional.  Any section or key it provides is
merged over `DEFAULT_CONFIG`, so a config file only needs to list the
values it changes.  See `config.example.yaml` at the repository root.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "crawl": {
        "timeout_seconds": 60,
    },
    "credentials": {
        "path": "~/.resumeflow/credentials.json",
    },
    "output": {
        "profile": "profile.json",
        "resume": "resume.json",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML config at `config_path` merged over the defaults.

    Args:
        config_path: Path to a YAML file, or None for the defaults.

    Raises:
        FileNotFoundError: If `config_path` does not exist.
        yaml.YAMLError: If the file is not valid YAML.
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    logger.info("Loaded configuration from %s", path)
    return _merge(DEFAULT_CONFIG, data)
