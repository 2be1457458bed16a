# strictpass/config.py
"""
Settings persistence for StrictPass.
Settings saved as JSON in %APPDATA%/StrictPass/config.json (Windows) or ~/.strictpass/config.json (fallback).

Only the surroundings are configurable (word list, log level); the policy
thresholds in strictpass.evaluator are fixed.
"""

import logging
import os
from typing import Any, Dict, Optional

from .storage import app_dir, atomic_write_bytes, dump_json_bytes, read_bytes, read_json_bytes

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "dictionary_path": None,  # if None, the built-in common-password list is used
    "log_level": "INFO",
}

def config_path() -> str:
    return os.path.join(app_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = read_json_bytes(read_bytes(p))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    atomic_write_bytes(p, dump_json_bytes(cfg))
    return p
