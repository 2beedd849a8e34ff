"""Consistency checks over the entry store and the room indexes.

These checks only read. They report every problem they find instead of
stopping at the first one, and log each problem at DEBUG.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from roomlog.models.entry import LogEntry, SortKey
from roomlog.store.entries import EntryHandle, EntryStore
from roomlog.store.ordering import compare_entries
from roomlog.store.registry import RoomRegistry

_logger = logging.getLogger(__name__)


class CheckReport(BaseModel):
    """Outcome of a consistency check."""

    model_config = ConfigDict(frozen=True)

    name: str
    checked: int = 0
    problems: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.problems


def _report(name: str, checked: int, problems: list[str]) -> CheckReport:
    for problem in problems:
        _logger.debug("%s check: %s", name, problem)
    _logger.debug("%s check %s (%d checked)", name, "passed" if not problems else "failed", checked)
    return CheckReport(name=name, checked=checked, problems=problems)


def check_order(store: EntryStore) -> CheckReport:
    """Assert the store is non-decreasing under the composite key."""
    problems: list[str] = []
    previous: LogEntry | None = None
    for slot, entry in enumerate(store):
        if previous is not None and compare_entries(entry, previous) < 0:
            problems.append(f"slot {slot} key {entry.sort_key} sorts before slot {slot - 1} key {previous.sort_key}")
        previous = entry
    return _report("order", len(store), problems)


def check_room_links(store: EntryStore, registry: RoomRegistry) -> CheckReport:
    """Assert every entry is referenced exactly once, by its owning room's index.

    Also checks that every index reference is live, owned by the indexing
    room, and that each index is sorted under the composite key. Each
    handle's slot must hold the entry the handle resolves to.
    """
    problems: list[str] = []
    references: dict[EntryHandle, int] = {}
    checked = 0

    for room in registry:
        previous: SortKey | None = None
        for position, handle in enumerate(room.index.handles()):
            checked += 1
            references[handle] = references.get(handle, 0) + 1
            if handle not in store:
                problems.append(f"room {room.name!r} position {position} references a missing entry")
                continue
            entry = store.resolve(handle)
            if entry.room is not room:
                problems.append(
                    f"room {room.name!r} position {position} references an entry owned by {entry.room.name!r}"
                )
            key = entry.sort_key
            if previous is not None and key < previous:
                problems.append(f"room {room.name!r} position {position} is out of order")
            previous = key

    for slot, handle in enumerate(store.handles()):
        entry = store.resolve(handle)
        recorded = store.slot_of(handle)
        if recorded != slot:
            problems.append(f"entry at slot {slot} is recorded at slot {recorded}")
        count = references.get(handle, 0)
        if count != 1:
            problems.append(f"entry at slot {slot} is referenced {count} times by room indexes")
        if entry.room not in registry:
            problems.append(f"entry at slot {slot} belongs to unregistered room {entry.room.name!r}")
        elif handle not in entry.room.index:
            problems.append(f"entry at slot {slot} is missing from room {entry.room.name!r}")

    return _report("room links", checked, problems)
