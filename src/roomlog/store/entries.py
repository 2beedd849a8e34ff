"""Globally sorted, bounded entry store.

The store owns every :class:`~roomlog.models.entry.LogEntry`. Callers outside
the store refer to entries through :class:`EntryHandle` values, which stay
valid for the entry's lifetime no matter how often it is shifted. The store
keeps a handle -> slot table and retargets it for every entry a shift
relocates.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from roomlog.exceptions import NullReferenceError, StoreFullError
from roomlog.models.entry import LogEntry, SortKey
from roomlog.store.ordering import first_greater

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EntryHandle:
    """Stable reference to an entry held by an :class:`EntryStore`."""

    serial: int


class EntryStore:
    """Bounded sequence of log entries kept sorted by the composite key."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[EntryHandle] = []
        self._entries: dict[EntryHandle, LogEntry] = {}
        self._positions: dict[EntryHandle, int] = {}
        self._serials = itertools.count(1)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._slots) >= self._capacity

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[LogEntry]:
        for handle in self._slots:
            yield self._entries[handle]

    def __getitem__(self, slot: int) -> LogEntry:
        return self._entries[self._slots[slot]]

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries

    def handles(self) -> tuple[EntryHandle, ...]:
        """Handles in slot order."""
        return tuple(self._slots)

    def resolve(self, handle: EntryHandle) -> LogEntry:
        """Return the live entry behind *handle*."""
        entry = self._entries.get(handle)
        if entry is None:
            raise NullReferenceError(f"{handle!r} does not reference a live entry")
        return entry

    def slot_of(self, handle: EntryHandle) -> int:
        """Current storage slot of the entry behind *handle*."""
        slot = self._positions.get(handle)
        if slot is None:
            raise NullReferenceError(f"{handle!r} does not reference a live entry")
        return slot

    def insertion_point(self, entry: LogEntry) -> int:
        """Slot a new *entry* would occupy: before the first strictly greater entry."""
        return first_greater(self._slots, entry.sort_key, self._key_of)

    def insert(self, entry: LogEntry) -> EntryHandle:
        """Insert *entry* at its sorted slot and return its handle.

        Every entry at or after the insertion slot moves one slot toward the
        tail, highest slot first, and its position is retargeted before the
        new entry is written.
        """
        if self.is_full:
            raise StoreFullError(f"entry store is full ({self._capacity} entries)", capacity=self._capacity)

        position = self.insertion_point(entry)
        handle = EntryHandle(next(self._serials))

        # Grow by one at the tail, then walk the tail down to the insertion slot.
        self._slots.append(handle)
        for slot in range(len(self._slots) - 1, position, -1):
            moved = self._slots[slot - 1]
            self._slots[slot] = moved
            self._positions[moved] = slot

        self._slots[position] = handle
        self._entries[handle] = entry
        self._positions[handle] = position

        _logger.debug(
            "Stored entry room=%s kind=%s ts=%d at slot=%d (shifted=%d)",
            entry.room.name,
            entry.kind.name,
            entry.timestamp,
            position,
            len(self._slots) - 1 - position,
        )
        return handle

    def _key_of(self, handle: EntryHandle) -> SortKey:
        return self._entries[handle].sort_key
