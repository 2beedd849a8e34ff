"""Room record."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roomlog.models.entry import LogEntry
    from roomlog.store.index import RoomIndex


class Room:
    """A named location owning a sorted view of its log entries.

    Rooms compare and hash by identity: the registry guarantees that at most
    one live room carries a given name, and entries keep a reference to the
    exact room object they were created for.
    """

    __slots__ = ("_name", "_index")

    def __init__(self, name: str, index: RoomIndex) -> None:
        self._name = name
        self._index = index

    @property
    def name(self) -> str:
        return self._name

    @property
    def index(self) -> RoomIndex:
        return self._index

    def entries(self) -> Iterator[LogEntry]:
        """Iterate this room's entries in composite-key order."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, entries={len(self._index)})"
