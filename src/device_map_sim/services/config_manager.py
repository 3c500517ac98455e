"""Config and Recording Management Module.

Handles listing, loading, and saving of map configurations and of recorded
device frames. Map configurations are validated against MapConfig; every
device in a recording is validated against Device.
"""

import json
from pathlib import Path
from typing import List

from ..schemas import DeviceCollection, MapConfig, parse_devices

SCENARIO_DIR = Path.cwd() / "scenarios"
FRAMES_DIR = Path.cwd() / "frames"


def list_configs() -> List[str]:
    """List all available map config files in the scenarios directory.

    Returns:
        List of filenames (e.g., ['default.json', 'large_hall.json']).
    """
    if not SCENARIO_DIR.exists():
        return []
    return sorted(f.name for f in SCENARIO_DIR.glob("*.json"))


def load_config(filename: str) -> MapConfig:
    """Load and validate a map config from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If JSON doesn't match schema.
    """
    file_path = SCENARIO_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return MapConfig(**data)


def save_config(config: MapConfig, filename: str) -> None:
    """Save a map config to a JSON file."""
    SCENARIO_DIR.mkdir(parents=True, exist_ok=True)
    file_path = SCENARIO_DIR / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))


def list_recordings() -> List[str]:
    """List all recorded device frame files."""
    if not FRAMES_DIR.exists():
        return []
    return sorted(f.name for f in FRAMES_DIR.glob("*.json"))


def load_frames(filename: str) -> list[DeviceCollection]:
    """Load a recording: a JSON list of frames, each a list of device dicts.

    Invalid device records inside a frame are dropped (see parse_devices).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If the top level is not a list of lists.
    """
    file_path = FRAMES_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Recording not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list) or not all(isinstance(fr, list) for fr in data):
        raise ValueError(f"{filename}: expected a list of device lists")

    return [parse_devices(frame) for frame in data]


def save_frames(frames: list[DeviceCollection], filename: str) -> None:
    """Save recorded frames as JSON."""
    FRAMES_DIR.mkdir(parents=True, exist_ok=True)
    file_path = FRAMES_DIR / filename

    payload = [[d.model_dump(exclude_none=True) for d in frame] for frame in frames]
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
