"""Saved configuration list and last-used index."""

from __future__ import annotations

import logging

from .models import Configuration
from .settings import LAST_CONFIG_INDEX_KEY, Settings

log = logging.getLogger(__name__)


class ConfigStore:
    """Ordered list of saved configurations, read and written through Settings."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._configs: list[Configuration] = []
        self._last_config_index = settings.get_uint(LAST_CONFIG_INDEX_KEY)

    @property
    def configs(self) -> list[Configuration]:
        return self._configs

    @property
    def last_config_index(self) -> int:
        return self._last_config_index

    def reload(self) -> None:
        """Replace the in-memory list with what is persisted."""
        self._configs = self._settings.get_configs()
        self._last_config_index = self._settings.get_uint(LAST_CONFIG_INDEX_KEY)
        log.debug("Loaded %d saved configuration(s)", len(self._configs))

    def append(self, config: Configuration) -> None:
        """Add *config* at the end and persist the whole list."""
        self._configs.append(config)
        self._settings.set_configs(self._configs)
        log.info("Saved configuration %r", config.name)

    def index_of(self, config: Configuration) -> int:
        return self._configs.index(config)

    def save_last_config_index(self, index: int) -> None:
        self._last_config_index = index
        self._settings.set_uint(LAST_CONFIG_INDEX_KEY, index)

    def last_config(self) -> Configuration | None:
        """Return the last-used configuration, or None if the index is stale."""
        if 0 <= self._last_config_index < len(self._configs):
            return self._configs[self._last_config_index]
        return None
