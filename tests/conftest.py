"""Test fixtures: fake switcher, fake name dialog, settings in a temp dir."""

from pathlib import Path

import pytest

from layoutcycle.dialog import NameDialog
from layoutcycle.models import Configuration, MonitorsState, PhysicalDisplay
from layoutcycle.settings import Settings
from layoutcycle.switcher import DisplayConfigSwitcher


D1 = PhysicalDisplay("eDP-1", "BOE", "0x0a1c", "0x00000000")
D2 = PhysicalDisplay("DP-1", "GSM", "LG ULTRAWIDE", "0x00038C43")
D3 = PhysicalDisplay("HDMI-1", "DEL", "DELL U2415", "7MT0186H0XKL")


def make_config(name, hash_, displays, payload=None):
    return Configuration(
        name=name,
        hash=hash_,
        logical_monitors=[[0, 0, 1.0, 0, True, [list(d) for d in displays]]],
        properties=payload if payload is not None else {"layout-mode": 1},
        physical_displays=tuple(displays),
    )


class FakeSwitcher(DisplayConfigSwitcher):
    """Switcher with scripted live state; applies are only recorded."""

    def __init__(self, displays=None, live_hash=None):
        super().__init__()
        self.displays = list(displays) if displays is not None else None
        self.live_hash = live_hash
        self.applied = []
        self.signals_disconnected = False

    def get_physical_display_info(self):
        return None if self.displays is None else list(self.displays)

    def get_monitors_config(self):
        if self.displays is None or self.live_hash is None:
            return None
        return MonitorsState(
            hash=self.live_hash,
            logical_monitors=[[0, 0, 1.0, 0, True, []]],
            properties={"layout-mode": 1},
            physical_displays=tuple(self.displays),
        )

    def has_state(self):
        return self.displays is not None

    def apply_monitors_config(self, logical_monitors, properties):
        self.applied.append((logical_monitors, properties))

    def disconnect_signals(self):
        self.signals_disconnected = True

    def change(self, displays=..., live_hash=...):
        """Simulate the display server reporting a new state."""
        if displays is not ...:
            self.displays = None if displays is None else list(displays)
        if live_hash is not ...:
            self.live_hash = live_hash
        self.emit("state-changed")


class FakeDialog(NameDialog):
    def __init__(self):
        super().__init__()
        self.presented = 0

    def present(self):
        self.presented += 1


@pytest.fixture(autouse=True)
def xdg_config_home(tmp_path, monkeypatch) -> Path:
    """Keep every test away from the real ~/.config."""
    home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def settings_file(tmp_path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def settings(settings_file) -> Settings:
    return Settings(settings_file)


@pytest.fixture
def dialog() -> FakeDialog:
    return FakeDialog()
