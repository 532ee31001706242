"""Topology matching: which saved configurations fit the attached displays."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Configuration, PhysicalDisplay


def filter_configs(
    configs: Sequence[Configuration],
    live_displays: Iterable[PhysicalDisplay] | None,
    previous: list[Configuration],
) -> list[Configuration]:
    """Return the configurations applicable to *live_displays*, in saved order.

    When the live display set is unavailable (``None``) the *previous*
    result is returned unchanged, so a transient gap in switcher state does
    not empty the menu.
    """
    if live_displays is None:
        return previous

    live = {PhysicalDisplay.coerce(d) for d in live_displays}
    return [c for c in configs if all(d in live for d in c.physical_displays)]
