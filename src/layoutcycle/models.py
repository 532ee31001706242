"""Data models: PhysicalDisplay, Configuration, MonitorsState."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Sequence


# ── PhysicalDisplay ──────────────────────────────────────────────────────

class PhysicalDisplay(NamedTuple):
    """Hardware identity of one attached screen."""

    connector: str = ""         # e.g. "DP-1", "eDP-1"
    vendor: str = ""            # e.g. "GSM"
    product: str = ""           # e.g. "LG ULTRAWIDE"
    serial: str = ""            # e.g. "0x00038C43"

    @classmethod
    def coerce(cls, value: Sequence[str]) -> PhysicalDisplay:
        """Build from any 4-element sequence (list from JSON, tuple from D-Bus)."""
        if isinstance(value, cls):
            return value
        items = tuple(value)
        if len(items) != 4:
            raise ValueError(f"physical display needs 4 fields, got {len(items)}")
        if not all(isinstance(v, str) for v in items):
            raise ValueError(f"physical display fields must be strings, got {items!r}")
        return cls(*items)


def _coerce_displays(values: Sequence[Sequence[str]]) -> tuple[PhysicalDisplay, ...]:
    return tuple(PhysicalDisplay.coerce(v) for v in values)


# ── Configuration ────────────────────────────────────────────────────────

@dataclass(eq=False)
class Configuration:
    """A saved, named monitor arrangement.

    Compared by identity: two entries saved from the same arrangement are
    still distinct list members.  ``logical_monitors`` and ``properties``
    are opaque and only relayed back to the switcher.
    """

    name: str = ""
    hash: int = 0
    logical_monitors: list[Any] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)
    physical_displays: tuple[PhysicalDisplay, ...] = ()

    def __post_init__(self) -> None:
        self.physical_displays = _coerce_displays(self.physical_displays)

    def to_tuple(self) -> tuple:
        """Serialize to the persisted 5-tuple."""
        return (
            self.name,
            self.hash,
            self.logical_monitors,
            self.properties,
            [list(d) for d in self.physical_displays],
        )

    @classmethod
    def from_tuple(cls, data: Sequence[Any]) -> Configuration:
        """Deserialize from the persisted 5-tuple.

        Raises ValueError when the entry does not have the expected shape.
        """
        if not isinstance(data, (list, tuple)) or len(data) != 5:
            raise ValueError(f"configuration entry must have 5 fields: {data!r}")
        name, hash_, logical_monitors, properties, displays = data
        if not isinstance(name, str):
            raise ValueError(f"configuration name must be a string: {name!r}")
        if isinstance(hash_, bool) or not isinstance(hash_, int) or hash_ < 0:
            raise ValueError(f"configuration hash must be an unsigned int: {hash_!r}")
        if not isinstance(properties, dict):
            raise ValueError(f"configuration properties must be a mapping: {properties!r}")
        if not isinstance(displays, (list, tuple)):
            raise ValueError(f"physical displays must be a list: {displays!r}")
        return cls(
            name=name,
            hash=hash_,
            logical_monitors=logical_monitors,
            properties=properties,
            physical_displays=_coerce_displays(displays),
        )

    def describe_displays(self) -> str:
        """Short human-readable list of the displays this entry needs."""
        return ", ".join(
            " ".join(p for p in (d.vendor, d.product) if p) or d.connector
            for d in self.physical_displays
        )


# ── MonitorsState ────────────────────────────────────────────────────────

@dataclass
class MonitorsState:
    """Live arrangement as reported by the switcher."""

    hash: int = 0
    logical_monitors: list[Any] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)
    physical_displays: tuple[PhysicalDisplay, ...] = ()

    def __post_init__(self) -> None:
        self.physical_displays = _coerce_displays(self.physical_displays)

    def to_configuration(self, name: str) -> Configuration:
        """Pair the live arrangement with a user-supplied name."""
        return Configuration(
            name=name,
            hash=self.hash,
            logical_monitors=self.logical_monitors,
            properties=self.properties,
            physical_displays=self.physical_displays,
        )
