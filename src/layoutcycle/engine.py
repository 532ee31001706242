"""Session engine: wires the store, matcher, selector and workflows together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gi.repository import GObject

from .add_config import AddConfigWorkflow
from .dialog import NameDialog
from .models import Configuration
from .restore import DefaultLoader
from .selector import ConfigSelector
from .settings import CONFIGS_KEY, Settings
from .store import ConfigStore
from .switcher import DisplayConfigSwitcher
from .utils import load_app_settings

log = logging.getLogger(__name__)

NO_CONFIGS_MESSAGE = "No configurations saved for this display setup."


@dataclass
class MenuState:
    """What a quick-settings toggle should show after an update."""

    items: list[tuple[Configuration, bool]] = field(default_factory=list)
    subtitle: str | None = None
    checked: bool = False
    placeholder: str | None = None
    can_add: bool = True


class DisplayConfigEngine(GObject.Object):
    """One instance per session.  Call :meth:`teardown` when the session ends."""

    __gsignals__ = {
        "menu-changed": (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def __init__(
        self,
        switcher: DisplayConfigSwitcher,
        settings: Settings,
        dialog: NameDialog,
        *,
        restore_on_startup: bool | None = None,
    ) -> None:
        super().__init__()
        if restore_on_startup is None:
            restore_on_startup = load_app_settings().get("restore_on_startup", True)

        self._switcher = switcher
        self._settings = settings
        self._store = ConfigStore(settings)
        self._selector = ConfigSelector(self._store, switcher)
        self._loader = DefaultLoader(
            self._store, self._selector, switcher, enabled=restore_on_startup,
        )
        self._workflow = AddConfigWorkflow(self._store, switcher, dialog, on_added=self.update)
        self._menu_state = MenuState()

        self._configs_handler: int | None = settings.connect(
            f"changed::{CONFIGS_KEY}", self._on_configs_changed,
        )
        self._state_handler: int | None = switcher.connect(
            "state-changed", self._on_state_changed,
        )

        self._on_configs_changed(settings, CONFIGS_KEY)

    # ── state ───────────────────────────────────────────────────────────

    @property
    def configs(self) -> list[Configuration]:
        return self._store.configs

    @property
    def current_configs(self) -> list[Configuration]:
        return self._selector.current_configs

    @property
    def active_config(self) -> Configuration | None:
        return self._selector.active_config

    @property
    def last_config_index(self) -> int:
        return self._store.last_config_index

    @property
    def default_loaded(self) -> bool:
        return self._loader.default_loaded

    @property
    def menu_state(self) -> MenuState:
        return self._menu_state

    # ── signal handlers ─────────────────────────────────────────────────

    def _on_configs_changed(self, _settings: Settings, _key: str) -> None:
        self._store.reload()
        self.update()

    def _on_state_changed(self, _switcher: DisplayConfigSwitcher) -> None:
        self.update()

    def update(self) -> None:
        """Recompute applicable and active configurations, then the menu."""
        self._selector.refresh_current(self._switcher.get_physical_display_info())
        self._loader.maybe_restore()

        live_state = self._switcher.get_monitors_config() if self._store.configs else None
        self._selector.refresh_active(live_state)

        self._menu_state = self._build_menu_state()
        self.emit("menu-changed")

    def _build_menu_state(self) -> MenuState:
        active = self._selector.active_config
        if not self._store.configs:
            return MenuState(placeholder=NO_CONFIGS_MESSAGE)
        return MenuState(
            items=[(c, c is active) for c in self._selector.current_configs],
            subtitle=active.name if active is not None else None,
            checked=active is not None,
            can_add=active is None,
        )

    # ── user actions ────────────────────────────────────────────────────

    def activate(self) -> None:
        """Toggle clicked: move on to the next applicable configuration."""
        self._selector.cycle_next()

    def select(self, config: Configuration) -> None:
        self._selector.select_explicit(config)

    def add_config(self) -> None:
        if not self._menu_state.can_add:
            log.debug("Live arrangement is already saved as %r", self.active_config.name)
            return
        self._workflow.begin()

    # ── lifecycle ───────────────────────────────────────────────────────

    def teardown(self) -> None:
        """Release every subscription taken by this engine."""
        if self._configs_handler is not None:
            self._settings.disconnect(self._configs_handler)
            self._configs_handler = None
        if self._state_handler is not None:
            self._switcher.disconnect(self._state_handler)
            self._state_handler = None
            self._switcher.disconnect_signals()
        self._workflow.cancel()
