"""Utility helpers: XDG paths, file I/O, app configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


def config_dir() -> Path:
    """Return ~/.config/layoutcycle, creating it if needed."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    d = base / "layoutcycle"
    d.mkdir(parents=True, exist_ok=True)
    return d


def settings_path() -> Path:
    """Return the path of the saved-configurations store."""
    return config_dir() / "settings.json"


def read_json(path: Path) -> dict | list | None:
    """Read and parse a JSON file, returning None on failure."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except OSError as e:
        log.warning("Cannot read %s: %s", path, e)
        return None
    except json.JSONDecodeError:
        return None


def write_json(path: Path, data: dict | list) -> None:
    """Write data as formatted JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def _app_settings_path() -> Path:
    """Return the path to the global app settings file."""
    return config_dir() / "app.json"


def load_app_settings() -> dict:
    """Load global application settings."""
    data = read_json(_app_settings_path())
    return data if isinstance(data, dict) else {}


def save_app_settings(settings: dict) -> None:
    """Save global application settings."""
    write_json(_app_settings_path(), settings)
