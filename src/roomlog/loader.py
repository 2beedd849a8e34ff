"""Bulk and sample data loading.

Loading goes through the same per-call operations as interactive use. A
failing room or reading is recorded in the returned :class:`LoadReport` and
loading carries on with the next item.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from roomlog.exceptions import ErrorCode, RoomLogError
from roomlog.manager import RoomLog
from roomlog.models.reading import ReadingKind

_logger = logging.getLogger(__name__)


class ReadingRecord(BaseModel):
    """One reading to load, addressed by room name."""

    model_config = ConfigDict(frozen=True)

    room: str
    kind: int
    value: Any
    timestamp: int


class LoadFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: str
    code: ErrorCode | None = None
    message: str


class LoadReport(BaseModel):
    """Aggregate outcome of a bulk load."""

    model_config = ConfigDict(frozen=True)

    rooms_added: int = 0
    entries_added: int = 0
    failures: list[LoadFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


SAMPLE_ROOMS: tuple[str, ...] = ("Kitchen", "Living Room", "Bedroom", "Garage", "Basement")

SAMPLE_READINGS: tuple[ReadingRecord, ...] = (
    ReadingRecord(room="Kitchen", kind=ReadingKind.TEMPERATURE, value=21.5, timestamp=1000),
    ReadingRecord(room="Kitchen", kind=ReadingKind.SOUND, value=55, timestamp=1010),
    ReadingRecord(room="Kitchen", kind=ReadingKind.TEMPERATURE, value=22.75, timestamp=940),
    ReadingRecord(room="Kitchen", kind=ReadingKind.MOTION, value=(1, 0, 0), timestamp=1005),
    ReadingRecord(room="Living Room", kind=ReadingKind.SOUND, value=42, timestamp=1200),
    ReadingRecord(room="Living Room", kind=ReadingKind.MOTION, value=(0, 1, 1), timestamp=1100),
    ReadingRecord(room="Living Room", kind=ReadingKind.TEMPERATURE, value=20.0, timestamp=1150),
    ReadingRecord(room="Living Room", kind=ReadingKind.SOUND, value=61, timestamp=1020),
    ReadingRecord(room="Bedroom", kind=ReadingKind.TEMPERATURE, value=18.25, timestamp=600),
    ReadingRecord(room="Bedroom", kind=ReadingKind.MOTION, value=(0, 0, 0), timestamp=620),
    ReadingRecord(room="Bedroom", kind=ReadingKind.TEMPERATURE, value=18.0, timestamp=300),
    ReadingRecord(room="Garage", kind=ReadingKind.SOUND, value=78, timestamp=1500),
    ReadingRecord(room="Garage", kind=ReadingKind.TEMPERATURE, value=9.5, timestamp=1490),
    ReadingRecord(room="Garage", kind=ReadingKind.MOTION, value=(1, 1, 0), timestamp=1495),
    ReadingRecord(room="Basement", kind=ReadingKind.TEMPERATURE, value=14.0, timestamp=800),
    ReadingRecord(room="Basement", kind=ReadingKind.SOUND, value=30, timestamp=810),
)


def _failure(item: str, exc: RoomLogError) -> LoadFailure:
    _logger.debug("Load failed for %s: %s", item, exc)
    return LoadFailure(item=item, code=exc.code, message=str(exc))


def load_records(log: RoomLog, rooms: Iterable[str], readings: Iterable[ReadingRecord]) -> LoadReport:
    """Register *rooms*, then create every reading in *readings*.

    Readings may name rooms that were registered earlier; a reading for an
    unknown room is recorded as a ``NOT_FOUND`` failure.
    """
    rooms_added = 0
    entries_added = 0
    failures: list[LoadFailure] = []

    for name in rooms:
        try:
            log.register(name)
        except RoomLogError as exc:
            failures.append(_failure(f"room {name!r}", exc))
        else:
            rooms_added += 1

    for record in readings:
        item = f"{record.room!r} ts={record.timestamp}"
        try:
            room = log.get(record.room)
            log.create_entry(room, record.kind, record.value, record.timestamp)
        except RoomLogError as exc:
            failures.append(_failure(item, exc))
        else:
            entries_added += 1

    _logger.debug(
        "Loaded rooms=%d entries=%d failures=%d",
        rooms_added,
        entries_added,
        len(failures),
    )
    return LoadReport(rooms_added=rooms_added, entries_added=entries_added, failures=failures)


def load_sample(log: RoomLog) -> LoadReport:
    """Populate *log* with the built-in sample rooms and readings."""
    return load_records(log, SAMPLE_ROOMS, SAMPLE_READINGS)
