"""Active configuration tracking, explicit selection and cycling."""

from __future__ import annotations

import logging
from typing import Iterable

from .matcher import filter_configs
from .models import Configuration, MonitorsState, PhysicalDisplay
from .store import ConfigStore
from .switcher import DisplayConfigSwitcher

log = logging.getLogger(__name__)


class ConfigSelector:
    """Tracks which saved configurations apply and which one is live."""

    def __init__(self, store: ConfigStore, switcher: DisplayConfigSwitcher) -> None:
        self._store = store
        self._switcher = switcher
        self._current_configs: list[Configuration] = []
        self._active_config: Configuration | None = None

    @property
    def current_configs(self) -> list[Configuration]:
        return self._current_configs

    @property
    def active_config(self) -> Configuration | None:
        return self._active_config

    def refresh_current(self, live_displays: Iterable[PhysicalDisplay] | None) -> None:
        self._current_configs = filter_configs(
            self._store.configs, live_displays, self._current_configs,
        )
        # The previous list survives an unavailable topology, but entries
        # dropped by a settings reload must not linger.
        if live_displays is None:
            configs = self._store.configs
            self._current_configs = [
                c for c in self._current_configs if c in configs
            ]

    def refresh_active(self, live_state: MonitorsState | None) -> None:
        """Find the applicable configuration matching the live arrangement.

        Any match, including one caused by a change made outside this
        engine, is remembered as the last-used configuration.
        """
        self._active_config = None
        if live_state is None:
            return
        for config in self._current_configs:
            if config.hash == live_state.hash:
                self._active_config = config
                self._store.save_last_config_index(self._store.index_of(config))
                break

    def select_explicit(self, config: Configuration) -> None:
        """Ask the switcher to apply *config* if it is applicable."""
        if config not in self._current_configs:
            log.debug("Ignoring selection of inapplicable configuration %r", config.name)
            return
        log.info("Applying configuration %r", config.name)
        self._switcher.apply_monitors_config(config.logical_monitors, config.properties)

    def cycle_next(self) -> None:
        """Apply the applicable configuration after the active one, wrapping."""
        n = len(self._current_configs)
        if n == 0:
            return
        if self._active_config is None:
            self.select_explicit(self._current_configs[0])
            return
        i = self._current_configs.index(self._active_config)
        self.select_explicit(self._current_configs[(i + 1) % n])
