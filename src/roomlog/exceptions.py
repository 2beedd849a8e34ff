"""Custom exception hierarchy for roomlog."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Outcome codes shared by every rejected store operation."""

    NULL_REFERENCE = "null_reference"
    DUPLICATE = "duplicate"
    FULL = "full"
    INVALID_KIND = "invalid_kind"
    NOT_FOUND = "not_found"
    INVALID_NAME = "invalid_name"


class RoomLogError(Exception):
    """Base exception for all roomlog errors.

    Every subclass raised by a store operation sets :attr:`code`, so bulk
    callers can aggregate outcomes without matching on exception types.
    """

    code: ErrorCode | None = None


class RoomLogConfigError(RoomLogError):
    """Invalid or missing configuration."""


class NullReferenceError(RoomLogError):
    """A required room or entry reference was absent or not live."""

    code = ErrorCode.NULL_REFERENCE


class DuplicateRoomError(RoomLogError):
    """A room with the same name is already registered."""

    code = ErrorCode.DUPLICATE

    def __init__(self, message: str, *, name: str = "") -> None:
        self.name = name
        super().__init__(message)


class StoreFullError(RoomLogError):
    """Capacity exhausted on the registry, the entry store or a room index."""

    code = ErrorCode.FULL

    def __init__(self, message: str, *, capacity: int | None = None) -> None:
        self.capacity = capacity
        super().__init__(message)


class InvalidKindError(RoomLogError):
    """Reading kind outside the closed set, or a payload that does not fit it.

    Malformed timestamps are reported through this error as well, since
    they arrive together with the reading selection.
    """

    code = ErrorCode.INVALID_KIND


class RoomNotFoundError(RoomLogError):
    """Lookup by name found no room.

    Only raised by :meth:`roomlog.store.registry.RoomRegistry.get`;
    ``find`` reports a miss as ``None``.
    """

    code = ErrorCode.NOT_FOUND


class InvalidRoomNameError(RoomLogError):
    """Room name is empty or longer than the configured bound."""

    code = ErrorCode.INVALID_NAME
