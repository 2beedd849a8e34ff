"""Room log facade: registry, entry store and the insertion coordinator.

A :class:`RoomLog` is the single owner of one room registry and one entry
store. Every entry is created through :meth:`RoomLog.create_entry`, which
validates the whole request before touching either structure, so a rejected
call never leaves a partial shift behind.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from roomlog.config import RoomLogConfig
from roomlog.exceptions import InvalidKindError, NullReferenceError, StoreFullError
from roomlog.models.entry import LogEntry
from roomlog.models.reading import build_reading
from roomlog.models.room import Room
from roomlog.store.entries import EntryStore
from roomlog.store.registry import RoomRegistry

_logger = logging.getLogger(__name__)


class RoomLog:
    """In-memory, bounded log of sensor readings grouped by room.

    Parameters
    ----------
    config : RoomLogConfig or None
        Capacity and name-length bounds. Defaults to :class:`RoomLogConfig`.
    """

    def __init__(self, config: RoomLogConfig | None = None) -> None:
        self._config = config or RoomLogConfig()
        self._store = EntryStore(self._config.capacity)
        self._registry = RoomRegistry(
            self._store,
            capacity=self._config.capacity,
            max_name_length=self._config.max_name_length,
        )

    @property
    def config(self) -> RoomLogConfig:
        return self._config

    @property
    def store(self) -> EntryStore:
        return self._store

    @property
    def registry(self) -> RoomRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def register(self, name: str) -> Room:
        return self._registry.register(name)

    def find(self, name: str) -> Room | None:
        return self._registry.find(name)

    def get(self, name: str) -> Room:
        return self._registry.get(name)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def create_entry(self, room: Room | None, kind: Any, payload: Any, timestamp: int) -> LogEntry:
        """Create a reading for *room* and place it in sorted order.

        Parameters
        ----------
        room
            A room returned by :meth:`register` or :meth:`find` on this log.
        kind
            :class:`~roomlog.models.reading.ReadingKind` or its selector
            (``1`` temperature, ``2`` sound level, ``3`` motion).
        payload
            Float degrees Celsius, integer decibels, or three 0/1 motion flags.
        timestamp
            Integer reading timestamp.

        Raises
        ------
        NullReferenceError
            *room* is missing or does not belong to this log.
        InvalidKindError
            *kind* is outside the closed set, or *payload* or *timestamp*
            is malformed.
        StoreFullError
            The entry store or the room's index is at capacity.
        """
        if room is None:
            raise NullReferenceError("room is required")
        if room not in self._registry:
            raise NullReferenceError(f"room {room.name!r} is not registered with this log")

        reading = build_reading(kind, payload)
        entry = _build_entry(room, reading, timestamp)

        if self._store.is_full:
            raise StoreFullError(f"entry store is full ({self._store.capacity} entries)", capacity=self._store.capacity)
        # Only trips when a room index is bounded below the store capacity.
        if room.index.is_full:
            raise StoreFullError(
                f"room {room.name!r} is full ({room.index.capacity} entries)",
                capacity=room.index.capacity,
            )

        handle = self._store.insert(entry)
        room.index.insert(handle)
        _logger.debug("Created %s entry for room=%s ts=%d", entry.kind.name, room.name, entry.timestamp)
        return entry

    def entries(self) -> Iterator[LogEntry]:
        """All entries in global composite-key order."""
        return iter(self._store)

    def rooms(self) -> Iterator[Room]:
        """All rooms in registration order."""
        return iter(self._registry)


def _build_entry(room: Room, reading: Any, timestamp: Any) -> LogEntry:
    try:
        return LogEntry(room=room, reading=reading, timestamp=timestamp)
    except ValidationError as exc:
        raise InvalidKindError(f"timestamp must be an integer, got {timestamp!r}") from exc
