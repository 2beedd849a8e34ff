"""Log entry model."""

from __future__ import annotations

from pydantic import ConfigDict, StrictInt

from roomlog.models._base import RoomLogBaseModel
from roomlog.models.reading import Reading, ReadingKind
from roomlog.models.room import Room

SortKey = tuple[str, int, int]
"""Composite ordering key: room name, kind rank, timestamp."""


class LogEntry(RoomLogBaseModel):
    """One sensor reading owned by a room.

    Parameters
    ----------
    room : Room
        Owning room. Fixed at creation.
    reading : Reading
        Kind-tagged payload.
    timestamp : int
        Integer reading timestamp.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    room: Room
    reading: Reading
    timestamp: StrictInt

    @property
    def kind(self) -> ReadingKind:
        return self.reading.kind

    @property
    def sort_key(self) -> SortKey:
        return (self.room.name, self.reading.kind.rank, self.timestamp)
