"""Command-line preferences: list, rename, delete and reorder saved configurations.

Usage:
    layoutcycle-prefs [--settings PATH] <command> [args]

Commands:
    list                      Show saved configurations (* marks the last used)
    rename INDEX NAME         Rename a configuration
    delete INDEX              Delete a configuration
    move INDEX NEW_INDEX      Move a configuration to another position
    restore {on,off}          Re-apply the last configuration at login
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .dialog import MAX_NAME_LENGTH
from .settings import LAST_CONFIG_INDEX_KEY, Settings
from .utils import load_app_settings, save_app_settings

log = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [layoutcycle] %(levelname)s %(message)s",
    )


def _check_index(index: int, count: int) -> None:
    if not 0 <= index < count:
        raise IndexError(f"no configuration at index {index} (have {count})")


def list_configs(settings: Settings) -> None:
    configs = settings.get_configs()
    if not configs:
        print("No configurations saved.")
        return
    last = settings.get_uint(LAST_CONFIG_INDEX_KEY)
    for i, config in enumerate(configs):
        marker = "*" if i == last else " "
        print(f"{marker} {i:>2}  {config.name:<{MAX_NAME_LENGTH}}  {config.describe_displays()}")


def rename_config(settings: Settings, index: int, name: str) -> None:
    name = name.strip()
    if not name or len(name) > MAX_NAME_LENGTH:
        raise ValueError(f"name must be 1-{MAX_NAME_LENGTH} characters")
    configs = settings.get_configs()
    _check_index(index, len(configs))
    old = configs[index].name
    configs[index].name = name
    settings.set_configs(configs)
    log.info("Renamed %r to %r", old, name)


def delete_config(settings: Settings, index: int) -> None:
    configs = settings.get_configs()
    _check_index(index, len(configs))
    removed = configs.pop(index)

    last = settings.get_uint(LAST_CONFIG_INDEX_KEY)
    if last > index:
        settings.set_uint(LAST_CONFIG_INDEX_KEY, last - 1)
    elif last == index:
        settings.set_uint(LAST_CONFIG_INDEX_KEY, 0)

    settings.set_configs(configs)
    log.info("Deleted %r", removed.name)


def move_config(settings: Settings, index: int, new_index: int) -> None:
    configs = settings.get_configs()
    _check_index(index, len(configs))
    _check_index(new_index, len(configs))
    if index == new_index:
        return

    last = settings.get_uint(LAST_CONFIG_INDEX_KEY)
    config = configs.pop(index)
    configs.insert(new_index, config)

    # Keep the last-used index pointing at the same entry.
    if last == index:
        last = new_index
    elif index < last <= new_index:
        last -= 1
    elif new_index <= last < index:
        last += 1

    settings.set_uint(LAST_CONFIG_INDEX_KEY, last)
    settings.set_configs(configs)
    log.info("Moved %r to position %d", config.name, new_index)


def set_restore(enabled: bool) -> None:
    app_settings = load_app_settings()
    app_settings["restore_on_startup"] = enabled
    save_app_settings(app_settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layoutcycle-prefs",
        description="Manage saved display configurations",
    )
    parser.add_argument("--settings", type=Path, default=None,
                        help="Settings file (default: ~/.config/layoutcycle/settings.json)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show saved configurations")

    p = sub.add_parser("rename", help="Rename a configuration")
    p.add_argument("index", type=int)
    p.add_argument("name")

    p = sub.add_parser("delete", help="Delete a configuration")
    p.add_argument("index", type=int)

    p = sub.add_parser("move", help="Move a configuration to another position")
    p.add_argument("index", type=int)
    p.add_argument("new_index", type=int)

    p = sub.add_parser("restore", help="Re-apply the last configuration at login")
    p.add_argument("state", choices=["on", "off"])

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "restore":
        set_restore(args.state == "on")
        return 0

    settings = Settings(args.settings)
    try:
        if args.command == "list":
            list_configs(settings)
        elif args.command == "rename":
            rename_config(settings, args.index, args.name)
        elif args.command == "delete":
            delete_config(settings, args.index)
        elif args.command == "move":
            move_config(settings, args.index, args.new_index)
    except (ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
