"""roomlog - Bounded in-memory log of sensor readings grouped by room."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("roomlog")
except PackageNotFoundError:
    __version__ = "0+local"
from roomlog.config import RoomLogConfig
from roomlog.exceptions import (
    DuplicateRoomError,
    ErrorCode,
    InvalidKindError,
    InvalidRoomNameError,
    NullReferenceError,
    RoomLogConfigError,
    RoomLogError,
    RoomNotFoundError,
    StoreFullError,
)
from roomlog.loader import LoadReport, ReadingRecord, load_records, load_sample
from roomlog.manager import RoomLog
from roomlog.models import (
    LogEntry,
    MotionReading,
    ReadingKind,
    Room,
    SoundReading,
    TemperatureReading,
)
from roomlog.report import format_all_entries, format_all_rooms, format_entry, format_room
from roomlog.store.entries import EntryHandle, EntryStore
from roomlog.store.index import RoomIndex
from roomlog.store.registry import RoomRegistry
from roomlog.verify import CheckReport, check_order, check_room_links

__all__ = [
    "__version__",
    "CheckReport",
    "DuplicateRoomError",
    "EntryHandle",
    "EntryStore",
    "ErrorCode",
    "InvalidKindError",
    "InvalidRoomNameError",
    "LoadReport",
    "LogEntry",
    "MotionReading",
    "NullReferenceError",
    "ReadingKind",
    "ReadingRecord",
    "Room",
    "RoomIndex",
    "RoomLog",
    "RoomLogConfig",
    "RoomLogConfigError",
    "RoomLogError",
    "RoomNotFoundError",
    "RoomRegistry",
    "SoundReading",
    "StoreFullError",
    "TemperatureReading",
    "check_order",
    "check_room_links",
    "format_all_entries",
    "format_all_rooms",
    "format_entry",
    "format_room",
    "load_records",
    "load_sample",
]
