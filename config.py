"""Load/save app settings. Settings live in CONFIG_DIR/pixelgarden.json; garden state in a FileStore beside it."""

import json
import logging
from pathlib import Path

from garden.constants import GRID_DEFAULT, MAX_GRID, RANDOM_CHANCE, TICK_MS
from garden.storage import FileStore

CONFIG_DIR = Path.home() / ".pixelgarden"
SETTINGS_FILENAME = "pixelgarden.json"

logger = logging.getLogger(__name__)


def get_settings_path(directory: Path | str | None = None) -> Path:
    return Path(directory or CONFIG_DIR) / SETTINGS_FILENAME


def _default_settings() -> dict:
    return {
        "grid_size": GRID_DEFAULT,
        "tick_ms": TICK_MS,
        "random_chance": RANDOM_CHANCE,
        "seed": -1,
        "tile_size": 28,
        "log_level": "INFO",
        "state_dir": None,
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_settings()
    for k in d:
        if k in data:
            d[k] = data[k]
    d["grid_size"] = max(1, min(MAX_GRID, int(d["grid_size"])))
    d["tick_ms"] = max(1, int(d["tick_ms"]))
    d["random_chance"] = max(0.0, min(1.0, float(d["random_chance"])))
    d["tile_size"] = max(4, int(d["tile_size"]))
    d["seed"] = int(d["seed"])
    d["state_dir"] = d["state_dir"] if isinstance(d["state_dir"], str) and d["state_dir"] else None
    return d


def load_settings(directory: Path | str | None = None) -> dict:
    """Return merged settings; a missing or unreadable file gives defaults."""
    p = get_settings_path(directory)
    if not p.exists():
        return _default_settings()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings file is not an object")
        return _merge_defaults(data)
    except (OSError, ValueError, TypeError, OverflowError) as e:
        logger.warning("using default settings, %s unreadable: %s", p, e)
        return _default_settings()


def save_settings(settings: dict, directory: Path | str | None = None) -> None:
    p = get_settings_path(directory)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(_merge_defaults(settings), f, indent=2)


def state_store(settings: dict, directory: Path | str | None = None) -> FileStore:
    """FileStore for garden state: settings' state_dir, else the config directory."""
    return FileStore(settings.get("state_dir") or directory or CONFIG_DIR)
