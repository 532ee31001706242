"""Re-apply the last-used configuration once after startup."""

from __future__ import annotations

import logging

from .selector import ConfigSelector
from .store import ConfigStore
from .switcher import DisplayConfigSwitcher

log = logging.getLogger(__name__)


class DefaultLoader:
    """One-shot restore of the remembered configuration."""

    def __init__(
        self,
        store: ConfigStore,
        selector: ConfigSelector,
        switcher: DisplayConfigSwitcher,
        *,
        enabled: bool = True,
    ) -> None:
        self._store = store
        self._selector = selector
        self._switcher = switcher
        # A disabled loader behaves as if it had already fired.
        self._default_loaded = not enabled

    @property
    def default_loaded(self) -> bool:
        return self._default_loaded

    def maybe_restore(self) -> None:
        """Apply the last-used configuration if it is still applicable.

        Fires at most once: the first time the switcher has state and at
        least one saved configuration applies.  The flag is consumed even
        when nothing ends up being applied.
        """
        if self._default_loaded:
            return
        if not self._switcher.has_state() or not self._selector.current_configs:
            return

        self._default_loaded = True
        last = self._store.last_config()
        if last is None:
            log.debug("Last configuration index %d is out of range, not restoring",
                      self._store.last_config_index)
            return
        if last not in self._selector.current_configs:
            log.debug("Last configuration %r is not applicable, not restoring", last.name)
            return

        log.info("Restoring last configuration %r", last.name)
        self._selector.select_explicit(last)
