# MIT License (see LICENSE)
"""
Input/Output utilities for the clock arena.

This subpackage provides:
    - Config files: Save and load ArenaConfig as JSON.
    - Snapshots: JSON views of collision state and arena frames.

Typical usage:
    from clock_arena.io import load_config, save_config, state_to_json

    config = load_config("arena.json")
    save_config(config.replace(unblock_debounce=0.05), "arena_slow.json")
    snapshot = state_to_json(arena.manager)
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_to_json,
    config_from_json,
    state_to_json,
    frame_to_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_to_json",
    "config_from_json",
    "state_to_json",
    "frame_to_json",
]
