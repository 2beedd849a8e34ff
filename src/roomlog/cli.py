"""Interactive menu for a room log.

Each menu item is one ``cmd_*`` function taking the log and a
:class:`Console`. The console wraps an input callable and an output stream so
the whole loop can be driven from tests.

Usage::

    roomlog --load-sample
    python -m roomlog --capacity 128 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

from roomlog.config import RoomLogConfig
from roomlog.exceptions import (
    DuplicateRoomError,
    InvalidKindError,
    InvalidRoomNameError,
    RoomLogConfigError,
    RoomLogError,
    StoreFullError,
)
from roomlog.loader import load_sample
from roomlog.manager import RoomLog
from roomlog.models.reading import ReadingKind
from roomlog.report import format_all_entries, format_all_rooms
from roomlog.verify import check_order, check_room_links

MENU = """
MAIN MENU
  (1) Load sample data
  (2) Print entries
  (3) Print rooms
  (4) Add room
  (5) Add entry
  (6) Test order
  (7) Test room entries
  (0) Exit
"""


class Console:
    """Prompt/print pair used by every command."""

    def __init__(self, input_fn: Callable[[str], str] | None = None, out: TextIO | None = None) -> None:
        self._input = input_fn or input
        self._out = out if out is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def say(self, text: str = "") -> None:
        print(text, file=self._out)


class _InvalidInput(ValueError):
    pass


# ── commands ─────────────────────────────────────────────────


def cmd_load_sample(log: RoomLog, console: Console) -> None:
    report = load_sample(log)
    if report.ok:
        console.say("Sample data loaded successfully.")
    else:
        console.say("Error loading sample data.")


def cmd_print_entries(log: RoomLog, console: Console) -> None:
    console.say()
    console.say(format_all_entries(log.store))


def cmd_print_rooms(log: RoomLog, console: Console) -> None:
    console.say()
    console.say(format_all_rooms(log.registry))


def cmd_add_room(log: RoomLog, console: Console) -> None:
    name = console.ask("Enter room name: ")
    try:
        log.register(name)
    except DuplicateRoomError:
        console.say(f"Error: Room '{name}' already exists.")
    except StoreFullError:
        console.say(f"Error: Cannot add more rooms (maximum {log.config.capacity} reached).")
    except InvalidRoomNameError:
        console.say(f"Error: Invalid room name (1-{log.config.max_name_length} bytes).")
    else:
        console.say(f"Room '{name}' added successfully.")


def _read_int(console: Console, prompt: str) -> int:
    try:
        return int(console.ask(prompt).strip())
    except ValueError as exc:
        raise _InvalidInput(str(exc)) from exc


def _read_payload(console: Console, kind: ReadingKind) -> Any:
    text = ""
    try:
        if kind is ReadingKind.TEMPERATURE:
            text = console.ask("Enter temperature (float): ")
            return float(text.strip())
        if kind is ReadingKind.SOUND:
            text = console.ask("Enter decibels (int): ")
            return int(text.strip())
        text = console.ask("Enter motion values (3 integers 0 or 1): ")
        return tuple(int(part) for part in text.split())
    except ValueError as exc:
        raise _InvalidInput(f"cannot parse {text!r}") from exc


def cmd_add_entry(log: RoomLog, console: Console) -> None:
    name = console.ask("Enter room name: ")
    room = log.find(name)
    if room is None:
        console.say(f"Error: Room '{name}' not found.")
        return

    try:
        timestamp = _read_int(console, "Enter timestamp: ")
        kind = ReadingKind(_read_int(console, "Enter type (1=TEMP, 2=DB, 3=MOTION): "))
        if kind is ReadingKind.UNKNOWN:
            raise _InvalidInput("unknown reading kind")
        payload = _read_payload(console, kind)
    except _InvalidInput:
        console.say("Error: Invalid entry data.")
        return

    try:
        log.create_entry(room, kind, payload, timestamp)
    except StoreFullError:
        console.say("Error: Cannot add more entries (maximum reached).")
    except InvalidKindError:
        console.say("Error: Invalid entry data.")
    except RoomLogError:
        console.say("Error adding entry.")
    else:
        console.say("Entry added successfully.")


def cmd_test_order(log: RoomLog, console: Console) -> None:
    report = check_order(log.store)
    console.say(f"Order test {'PASSED' if report.passed else 'FAILED'}.")


def cmd_test_rooms(log: RoomLog, console: Console) -> None:
    report = check_room_links(log.store, log.registry)
    console.say(f"Room entries test {'PASSED' if report.passed else 'FAILED'}.")


COMMANDS: dict[int, Callable[[RoomLog, Console], None]] = {
    1: cmd_load_sample,
    2: cmd_print_entries,
    3: cmd_print_rooms,
    4: cmd_add_room,
    5: cmd_add_entry,
    6: cmd_test_order,
    7: cmd_test_rooms,
}


def read_choice(console: Console) -> int:
    """Prompt until the user enters a menu number."""
    while True:
        try:
            choice = int(console.ask("Please enter a valid selection: ").strip())
        except ValueError:
            continue
        if choice == 0 or choice in COMMANDS:
            return choice


def run_menu(log: RoomLog, console: Console) -> None:
    """Show the menu and dispatch commands until the user exits."""
    try:
        while True:
            console.say(MENU)
            choice = read_choice(console)
            if choice == 0:
                break
            COMMANDS[choice](log, console)
    except EOFError:
        console.say()
    console.say("Exiting program.")


# ── entry point ──────────────────────────────────────────────


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="roomlog", description="Interactive in-memory room sensor log")
    parser.add_argument("--capacity", type=int, help="Maximum rooms, entries and per-room entries")
    parser.add_argument("--max-name-length", type=int, help="Maximum room name length in bytes")
    parser.add_argument("--load-sample", action="store_true", help="Load the sample data set before the menu")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.capacity is not None:
        overrides["capacity"] = args.capacity
    if args.max_name_length is not None:
        overrides["max_name_length"] = args.max_name_length
    try:
        config = RoomLogConfig.from_env(**overrides)
    except RoomLogConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    log = RoomLog(config)
    console = Console()
    if args.load_sample:
        cmd_load_sample(log, console)
    try:
        run_menu(log, console)
    except KeyboardInterrupt:
        print("\nAborted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
