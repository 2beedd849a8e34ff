from __future__ import annotations

import pytest

from roomlog._constants import TABLE_HEADER, TABLE_RULE
from roomlog.exceptions import InvalidKindError, NullReferenceError
from roomlog.manager import RoomLog
from roomlog.models.entry import LogEntry
from roomlog.report import format_all_entries, format_all_rooms, format_entry, format_room


@pytest.fixture
def log() -> RoomLog:
    return RoomLog()


def _row(room: str, timestamp: int, label: str, value: str) -> str:
    return room.ljust(15) + " " + str(timestamp).rjust(10) + "  " + label.ljust(10) + "  " + value


def test_format_temperature_entry(log: RoomLog) -> None:
    entry = log.create_entry(log.register("Kitchen"), 1, 21.5, 100)

    assert format_entry(entry) == "Kitchen" + " " * 8 + " " + " " * 7 + "100" + "  TEMP" + " " * 6 + "  21.50°C"


def test_format_temperature_rounds_to_two_places(log: RoomLog) -> None:
    entry = log.create_entry(log.register("Garage"), 1, -3.456, 7)

    assert format_entry(entry) == _row("Garage", 7, "TEMP", "-3.46°C")


def test_format_sound_entry(log: RoomLog) -> None:
    entry = log.create_entry(log.register("Den"), 2, 40, 50)

    assert format_entry(entry) == _row("Den", 50, "DB", "40 dB")


def test_format_motion_entry(log: RoomLog) -> None:
    entry = log.create_entry(log.register("Hall"), 3, (1, 0, 1), 3)

    assert format_entry(entry) == _row("Hall", 3, "MOTION", "[1,0,1]")


def test_format_entry_requires_entry() -> None:
    with pytest.raises(NullReferenceError):
        format_entry(None)


def test_format_entry_requires_room(log: RoomLog) -> None:
    entry = log.create_entry(log.register("Den"), 2, 40, 50)
    orphan = LogEntry.model_construct(room=None, reading=entry.reading, timestamp=1)

    with pytest.raises(NullReferenceError):
        format_entry(orphan)


def test_format_entry_rejects_unknown_reading(log: RoomLog) -> None:
    room = log.register("Den")
    bogus = LogEntry.model_construct(room=room, reading=object(), timestamp=1)

    with pytest.raises(InvalidKindError):
        format_entry(bogus)


def test_format_empty_room(log: RoomLog) -> None:
    room = log.register("Den")

    assert format_room(room) == "Room: Den (entries=0)\n  (No entries)"


def test_format_room_lists_entries_in_index_order(log: RoomLog) -> None:
    room = log.register("Kitchen")
    log.create_entry(room, 2, 40, 1)
    log.create_entry(room, 1, 21.5, 100)
    log.create_entry(room, 1, 19.0, 10)

    assert format_room(room).splitlines() == [
        "Room: Kitchen (entries=3)",
        TABLE_HEADER,
        TABLE_RULE,
        _row("Kitchen", 10, "TEMP", "19.00°C"),
        _row("Kitchen", 100, "TEMP", "21.50°C"),
        _row("Kitchen", 1, "DB", "40 dB"),
    ]


def test_format_room_requires_room() -> None:
    with pytest.raises(NullReferenceError):
        format_room(None)


def test_format_all_entries_empty(log: RoomLog) -> None:
    assert format_all_entries(log.store) == "All Entries (sorted):\n  (No entries)"


def test_format_all_entries_in_global_order(log: RoomLog) -> None:
    kitchen = log.register("Kitchen")
    den = log.register("Den")
    log.create_entry(kitchen, 1, 21.5, 100)
    log.create_entry(den, 2, 40, 50)

    assert format_all_entries(log.store).splitlines() == [
        "All Entries (sorted):",
        TABLE_HEADER,
        TABLE_RULE,
        _row("Den", 50, "DB", "40 dB"),
        _row("Kitchen", 100, "TEMP", "21.50°C"),
    ]


def test_format_all_rooms(log: RoomLog) -> None:
    assert format_all_rooms(log.registry) == "All Rooms:\n  (No rooms)"

    log.register("Kitchen")
    log.register("Den")

    assert format_all_rooms(log.registry).splitlines() == [
        "All Rooms:",
        "",
        "Room: Kitchen (entries=0)",
        "  (No entries)",
        "",
        "Room: Den (entries=0)",
        "  (No entries)",
    ]


def test_table_header_layout() -> None:
    assert TABLE_HEADER == "ROOM" + " " * 11 + " " + " TIMESTAMP" + "  TYPE" + " " * 6 + "  VALUE"
