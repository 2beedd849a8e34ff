"""Composite ordering shared by the entry store and every room index.

Entries sort by room name, then reading-kind rank, then timestamp, all
ascending. Room names compare by code point, which matches a byte-wise
comparison of their UTF-8 encoding.
"""

from __future__ import annotations

import bisect
from collections.abc import Callable, Sequence
from typing import TypeVar

from roomlog.exceptions import NullReferenceError
from roomlog.models.entry import LogEntry, SortKey

T = TypeVar("T")


def compare_entries(a: LogEntry | None, b: LogEntry | None) -> int:
    """Return a negative number, zero or a positive number as *a* sorts before, with or after *b*."""
    if a is None or b is None:
        raise NullReferenceError("cannot compare a missing entry")
    key_a, key_b = a.sort_key, b.sort_key
    return (key_a > key_b) - (key_a < key_b)


def first_greater(items: Sequence[T], key: SortKey, item_key: Callable[[T], SortKey]) -> int:
    """Index of the first item whose key is strictly greater than *key*.

    Returns ``len(items)`` when no such item exists. Inserting at this index
    places a new item after every existing item with an equal key, so items
    sharing a key keep insertion order.
    """
    return bisect.bisect_right(items, key, key=item_key)
