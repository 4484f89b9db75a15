"""
config_manager.py
-----------------
JSON loader for the round and spawn tables.

Features:
- Looks tables up by name in popshot/config/ (index built on first use)
- Recursively merges file data over code defaults
- Ignores '_notes' keys for human-readable tables
"""

import os
import json
from popshot.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

_TABLE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON table and merge it over its defaults.

    Args:
        filename: Table name ("rounds", "rounds.json") or a path to a .json file
        default_dict: Values used for anything the file leaves out
        strict: If True, raise FileNotFoundError on a missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = filename if os.path.isabs(filename) else _resolve_table(filename)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return dict(default_dict)

    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return _merge_dicts(default_dict, data)


# ===========================================================
# Table Lookup
# ===========================================================

def _build_index():
    """Map every bundled .json file name to its path."""
    global _TABLE_INDEX
    _TABLE_INDEX = {}
    if os.path.isdir(CONFIG_DIR):
        for name in os.listdir(CONFIG_DIR):
            if name.endswith(".json"):
                _TABLE_INDEX[name] = os.path.join(CONFIG_DIR, name)

    DebugLogger.init(f"Config index: {len(_TABLE_INDEX)} tables", category="loading")


def _resolve_table(filename):
    if _TABLE_INDEX is None:
        _build_index()

    name = filename.replace("\\", "/").lstrip("/")
    if not name.endswith(".json"):
        name += ".json"

    # Relative paths outside the index are tried as-is
    return _TABLE_INDEX.get(name, filename)


# ===========================================================
# Merge
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = dict(default)
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
