# MIT License (see LICENSE)
"""
JSON serialization for arena configuration and collision snapshots.

Configuration files let a host tune the arena without code changes. Keys
match ArenaConfig field names; any key left out takes its default, and only
non-default values are written back.

JSON Schema Overview:
---------------------
{
  "arena_radius": float,        # Default: 5.0
  "boundary_margin": float,     # Default: 0.1
  "actor_radius": float,        # Default: 0.4
  "hand_half_width": float,     # Default: 0.15
  "hand_start": float,          # Default: 0.3
  "hand_end": float,            # Default: 4.75
  "hysteresis_buffer": float,   # Default: 0.15
  "block_debounce": float,      # Seconds, default: 0.0 (instant)
  "unblock_debounce": float,    # Seconds, default: 0.03
  "max_frame_delta": float,     # Seconds, default: 0.1
  "hold_duration": float,       # Seconds, default: 33.0
  "walk_speed": float,          # Default: 0.8
  "turn_speed": float,          # Default: 2.0
  "birds_eye_speed": float      # Default: 0.8
}

Collision snapshots (state_to_json) are read-only views of a
CollisionStateManager, meant to be handed from the simulation thread to a
renderer or a debug overlay:
{
  "phase": "unblocked" | "pending_block" | "blocked" | "pending_unblock",
  "is_blocked": bool,
  "blocked_at_angle": float,
  "pending_block": bool, "pending_block_time": float,
  "pending_unblock": bool, "pending_unblock_time": float
}
"""
from __future__ import annotations
import json
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import numpy as np

from ..config import ArenaConfig
from ..collision.state import CollisionStateManager

if TYPE_CHECKING:
    from ..arena import ArenaFrame


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load the raw JSON object from a configuration file.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> ArenaConfig:
    """
    Load and validate an ArenaConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a key is unknown or a value is out of range.
    """
    return config_from_json(load_config_raw(path))


def config_from_json(data: dict[str, Any]) -> ArenaConfig:
    """
    Build an ArenaConfig from a dictionary.

    Missing keys take their defaults. Unknown keys are rejected so typos in
    hand-edited files do not silently fall back to defaults.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")

    known = set(ArenaConfig.field_names())
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    kwargs: dict[str, float] = {}
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Config value '{key}' must be a number, got {value!r}")
        kwargs[key] = float(value)
    return ArenaConfig(**kwargs)


def config_to_json(config: ArenaConfig) -> dict[str, Any]:
    """Serialize an ArenaConfig, keeping only values that differ from the defaults."""
    defaults = ArenaConfig()
    result: dict[str, Any] = {}
    for f in fields(ArenaConfig):
        value = getattr(config, f.name)
        if value != getattr(defaults, f.name):
            result[f.name] = value
    return result


def save_config(config: ArenaConfig, path: str, indent: int = 2) -> None:
    """Save an ArenaConfig to a JSON file on disk."""
    data = config_to_json(config)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def state_to_json(manager: CollisionStateManager) -> dict[str, Any]:
    """Snapshot of a collision state as plain JSON-compatible values."""
    return {
        "phase": manager.phase.value,
        "is_blocked": manager.is_blocked,
        "blocked_at_angle": float(manager.blocked_at_angle),
        "pending_block": manager.pending_block,
        "pending_block_time": float(manager.pending_block_time),
        "pending_unblock": manager.pending_unblock,
        "pending_unblock_time": float(manager.pending_unblock_time),
    }


def frame_to_json(frame: "ArenaFrame") -> dict[str, Any]:
    """Serialize an ArenaFrame for logging or sending to a client."""
    return {
        "time": frame.time,
        "dt": frame.dt,
        "angles": {
            "hour": frame.angles.hour,
            "minute": frame.angles.minute,
            "second": frame.angles.second,
        },
        "display_second": frame.display_second,
        "is_blocked": frame.is_blocked,
        "blocked_at_angle": frame.blocked_at_angle,
        "just_blocked": frame.just_blocked,
        "just_unblocked": frame.just_unblocked,
        "hold_completed": frame.hold_completed,
        "hold_time": frame.hold_time,
        "position": _to_list(frame.position),
    }


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
