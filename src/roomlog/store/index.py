"""Per-room sorted index of entry handles."""

from __future__ import annotations

from collections.abc import Iterator

from roomlog.exceptions import StoreFullError
from roomlog.models.entry import LogEntry, SortKey
from roomlog.store.entries import EntryHandle, EntryStore
from roomlog.store.ordering import first_greater


class RoomIndex:
    """Bounded, sorted sequence of non-owning references into an :class:`EntryStore`."""

    def __init__(self, store: EntryStore, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._store = store
        self._capacity = capacity
        self._handles: list[EntryHandle] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._handles) >= self._capacity

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[LogEntry]:
        for handle in self._handles:
            yield self._store.resolve(handle)

    def __contains__(self, handle: object) -> bool:
        return handle in self._handles

    def handles(self) -> tuple[EntryHandle, ...]:
        return tuple(self._handles)

    def insert(self, handle: EntryHandle) -> int:
        """Insert *handle* at its sorted position and return that position."""
        if self.is_full:
            raise StoreFullError(f"room index is full ({self._capacity} entries)", capacity=self._capacity)
        entry = self._store.resolve(handle)
        position = first_greater(self._handles, entry.sort_key, self._key_of)
        self._handles.insert(position, handle)
        return position

    def _key_of(self, handle: EntryHandle) -> SortKey:
        return self._store.resolve(handle).sort_key
