"""Bounded registry of uniquely named rooms."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from roomlog.exceptions import DuplicateRoomError, InvalidRoomNameError, RoomNotFoundError, StoreFullError
from roomlog.models.room import Room
from roomlog.store.entries import EntryStore
from roomlog.store.index import RoomIndex

_logger = logging.getLogger(__name__)


class RoomRegistry:
    """Append-only collection of rooms, kept in registration order.

    Each registered room gets a :class:`RoomIndex` over *store* bounded by
    the same *capacity* as the registry itself.
    """

    def __init__(self, store: EntryStore, *, capacity: int, max_name_length: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._store = store
        self._capacity = capacity
        self._max_name_length = max_name_length
        self._rooms: list[Room] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._rooms) >= self._capacity

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __contains__(self, room: object) -> bool:
        return any(candidate is room for candidate in self._rooms)

    def register(self, name: str) -> Room:
        """Register a new room called *name* and return it."""
        if not isinstance(name, str) or not name:
            raise InvalidRoomNameError("room name must be a non-empty string")
        if len(name.encode("utf-8")) > self._max_name_length:
            raise InvalidRoomNameError(f"room name longer than {self._max_name_length} bytes: {name!r}")
        if self.is_full:
            raise StoreFullError(f"room registry is full ({self._capacity} rooms)", capacity=self._capacity)
        if self.find(name) is not None:
            raise DuplicateRoomError(f"room {name!r} already exists", name=name)

        room = Room(name, RoomIndex(self._store, self._capacity))
        self._rooms.append(room)
        _logger.debug("Registered room %r (%d/%d)", name, len(self._rooms), self._capacity)
        return room

    def find(self, name: str) -> Room | None:
        """Linear scan by exact name; ``None`` when no room matches."""
        for room in self._rooms:
            if room.name == name:
                return room
        return None

    def get(self, name: str) -> Room:
        room = self.find(name)
        if room is None:
            raise RoomNotFoundError(f"room {name!r} not found")
        return room
