"""Display-configuration switcher contract.

Concrete switchers talk to the display server (for example over D-Bus) and
live outside this package.  The engine only needs the calls below plus the
``state-changed`` signal, emitted whenever the live arrangement or the set
of attached displays changes.
"""

from __future__ import annotations

from typing import Any

from gi.repository import GObject

from .models import MonitorsState, PhysicalDisplay


class DisplayConfigSwitcher(GObject.Object):
    """Base class for display-server clients."""

    __gsignals__ = {
        "state-changed": (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def get_physical_display_info(self) -> list[PhysicalDisplay] | None:
        """Return the attached displays, or None while the state is unknown."""
        raise NotImplementedError

    def get_monitors_config(self) -> MonitorsState | None:
        """Return the live arrangement, or None while the state is unknown."""
        raise NotImplementedError

    def has_state(self) -> bool:
        raise NotImplementedError

    def apply_monitors_config(self, logical_monitors: list[Any], properties: dict[str, Any]) -> None:
        """Request the display server to apply an arrangement.

        Returns immediately; completion is reported through ``state-changed``.
        """
        raise NotImplementedError

    def disconnect_signals(self) -> None:
        """Drop subscriptions to the display server."""
