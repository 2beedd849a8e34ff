"""Plain-text rendering of entries, rooms and the whole store."""

from __future__ import annotations

from collections.abc import Iterable

from roomlog._constants import (
    NO_ENTRIES,
    NO_ROOMS,
    ROOM_COLUMN_WIDTH,
    TABLE_HEADER,
    TABLE_RULE,
    TIMESTAMP_COLUMN_WIDTH,
    TYPE_COLUMN_WIDTH,
)
from roomlog.exceptions import InvalidKindError, NullReferenceError
from roomlog.models.entry import LogEntry
from roomlog.models.reading import MotionReading, SoundReading, TemperatureReading
from roomlog.models.room import Room
from roomlog.store.entries import EntryStore
from roomlog.store.registry import RoomRegistry


def format_value(entry: LogEntry) -> str:
    """Render the kind-specific payload: ``21.50°C``, ``40 dB`` or ``[0,1,0]``."""
    reading = entry.reading
    if isinstance(reading, TemperatureReading):
        return f"{reading.celsius:.2f}°C"
    if isinstance(reading, SoundReading):
        return f"{reading.decibels} dB"
    if isinstance(reading, MotionReading):
        return "[" + ",".join(str(flag) for flag in reading.flags) + "]"
    raise InvalidKindError(f"cannot format reading of kind {getattr(reading, 'kind', None)!r}")


def format_entry(entry: LogEntry | None) -> str:
    """Render one entry as a single table row."""
    if entry is None:
        raise NullReferenceError("entry is required")
    if getattr(entry, "room", None) is None:
        raise NullReferenceError("entry has no room")
    value = format_value(entry)
    return (
        f"{entry.room.name:<{ROOM_COLUMN_WIDTH}} "
        f"{entry.timestamp:>{TIMESTAMP_COLUMN_WIDTH}}  "
        f"{entry.kind.label:<{TYPE_COLUMN_WIDTH}}  "
        f"{value}"
    )


def _table(entries: Iterable[LogEntry]) -> list[str]:
    rows = [format_entry(entry) for entry in entries]
    if not rows:
        return [NO_ENTRIES]
    return [TABLE_HEADER, TABLE_RULE, *rows]


def format_room(room: Room | None) -> str:
    """Render a room header followed by its entries in index order."""
    if room is None:
        raise NullReferenceError("room is required")
    lines = [f"Room: {room.name} (entries={len(room)})"]
    lines.extend(_table(room.entries()))
    return "\n".join(lines)


def format_all_entries(store: EntryStore) -> str:
    """Render every entry in global sorted order."""
    lines = ["All Entries (sorted):"]
    lines.extend(_table(store))
    return "\n".join(lines)


def format_all_rooms(registry: RoomRegistry) -> str:
    """Render every room block in registration order."""
    lines = ["All Rooms:"]
    rooms = list(registry)
    if not rooms:
        lines.append(NO_ROOMS)
    for room in rooms:
        lines.append("")
        lines.append(format_room(room))
    return "\n".join(lines)
