"""Record models for roomlog."""

from roomlog.models._base import RoomLogBaseModel, RoomLogEnum
from roomlog.models.entry import LogEntry, SortKey
from roomlog.models.reading import (
    MotionReading,
    Reading,
    ReadingKind,
    SoundReading,
    TemperatureReading,
    build_reading,
    resolve_kind,
)
from roomlog.models.room import Room

__all__ = [
    "LogEntry",
    "MotionReading",
    "Reading",
    "ReadingKind",
    "Room",
    "RoomLogBaseModel",
    "RoomLogEnum",
    "SortKey",
    "SoundReading",
    "TemperatureReading",
    "build_reading",
    "resolve_kind",
]
