"""
config_manager.py
-----------------
JSON configuration loader for packaged entity data.

Features:
- Builds a file index of the package config directory once, on first lookup
- Recursively merges loaded data over in-code defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
from invaders_core.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Bare filename (looked up in the index) or absolute path
        default_dict: Default fallback config
        strict: If True, raise FileNotFoundError on a missing or unreadable file

    Returns:
        dict: Defaults with the file's values merged on top
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return default_dict.copy()


def build_file_index():
    """Scan the config directory and cache all JSON file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    if os.path.isdir(DATA_ROOT):
        for root, _, files in os.walk(DATA_ROOT):
            for file in files:
                if file.endswith(".json") and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.system(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def get_indexed_files():
    """Return copy of file index for debugging."""
    if _FILE_INDEX is None:
        build_file_index()
    return _FILE_INDEX.copy()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")
    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]
    if filename + ".json" in _FILE_INDEX:
        return _FILE_INDEX[filename + ".json"]

    # Unindexed: let the loader report it missing
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict):
            base = merged.get(key)
            merged[key] = _merge_dicts(base if isinstance(base, dict) else {}, value)
        else:
            merged[key] = value
    return merged
