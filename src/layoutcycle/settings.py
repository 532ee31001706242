"""Key-value settings store backed by a JSON file, with change notification."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path

import gi
gi.require_version("Gio", "2.0")
from gi.repository import Gio, GObject

from .models import Configuration
from .utils import read_json, settings_path, write_json

log = logging.getLogger(__name__)

CONFIGS_KEY = "configs"
LAST_CONFIG_INDEX_KEY = "last-config-index"

_DEFAULTS: dict = {
    CONFIGS_KEY: [],
    LAST_CONFIG_INDEX_KEY: 0,
}


class Settings(GObject.Object):
    """Persistent store for saved configurations and the last-used index.

    Emits the detailed ``changed`` signal (``changed::configs``,
    ``changed::last-config-index``) whenever a key is written, either
    through this object or, once :meth:`watch` is active, by another
    process editing the file.
    """

    __gsignals__ = {
        "changed": (GObject.SignalFlags.RUN_FIRST | GObject.SignalFlags.DETAILED, None, (str,)),
    }

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._path = path or settings_path()
        self._data = self._read()
        self._monitor: Gio.FileMonitor | None = None
        self._monitor_handler: int | None = None

    def _read(self) -> dict:
        data = read_json(self._path)
        if not isinstance(data, dict):
            if data is not None:
                log.warning("Ignoring malformed settings file %s", self._path)
            data = {}
        merged = copy.deepcopy(_DEFAULTS)
        for key in _DEFAULTS:
            if key in data:
                merged[key] = data[key]
        return merged

    def _write(self) -> None:
        write_json(self._path, self._data)

    def _set(self, key: str, value) -> None:
        # Start from the file, not the cache: another process may have
        # written keys the file monitor has not reported yet.
        fresh = self._read()
        external = [k for k in _DEFAULTS if k != key and fresh[k] != self._data[k]]
        # Keep the cache in the same shape a re-read of the file produces.
        fresh[key] = json.loads(json.dumps(value))
        self._data = fresh
        self._write()
        self.emit(f"changed::{key}", key)
        for k in external:
            log.info("Settings key %s changed externally", k)
            self.emit(f"changed::{k}", k)

    # ── configs ─────────────────────────────────────────────────────────

    def get_configs(self) -> list[Configuration]:
        """Return the saved configurations in order, skipping malformed entries."""
        raw = self._data[CONFIGS_KEY]
        if not isinstance(raw, list):
            log.warning("Saved configurations are not a list, ignoring")
            return []
        configs: list[Configuration] = []
        for i, entry in enumerate(raw):
            try:
                configs.append(Configuration.from_tuple(copy.deepcopy(entry)))
            except ValueError as e:
                log.warning("Skipping saved configuration %d: %s", i, e)
        return configs

    def set_configs(self, configs: list[Configuration]) -> None:
        self._set(CONFIGS_KEY, [list(c.to_tuple()) for c in configs])

    # ── unsigned integers ───────────────────────────────────────────────

    def get_uint(self, key: str) -> int:
        value = self._data.get(key, _DEFAULTS.get(key, 0))
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            log.warning("Invalid value for %s: %r, using 0", key, value)
            return 0
        return value

    def set_uint(self, key: str, value: int) -> None:
        if value < 0:
            raise ValueError(f"{key} must be non-negative, got {value}")
        if self._data.get(key) == value:
            return
        self._set(key, value)

    # ── external change monitoring ──────────────────────────────────────

    def watch(self) -> None:
        """Reload and notify when another process rewrites the settings file."""
        if self._monitor is not None:
            return
        gfile = Gio.File.new_for_path(str(self._path))
        self._monitor = gfile.monitor_file(Gio.FileMonitorFlags.NONE, None)
        self._monitor_handler = self._monitor.connect("changed", self._on_file_changed)
        log.debug("Watching %s", self._path)

    def unwatch(self) -> None:
        if self._monitor is None:
            return
        self._monitor.disconnect(self._monitor_handler)
        self._monitor.cancel()
        self._monitor = None
        self._monitor_handler = None

    def _on_file_changed(self, _monitor, _file, _other, event_type) -> None:
        if event_type not in (
            Gio.FileMonitorEvent.CHANGES_DONE_HINT,
            Gio.FileMonitorEvent.CREATED,
            Gio.FileMonitorEvent.DELETED,
        ):
            return
        self.reload()

    def reload(self) -> None:
        """Re-read the file and emit ``changed`` for every key that differs."""
        fresh = self._read()
        changed = [key for key in _DEFAULTS if fresh[key] != self._data[key]]
        self._data = fresh
        for key in changed:
            log.info("Settings key %s changed externally", key)
            self.emit(f"changed::{key}", key)
