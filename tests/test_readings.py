"""Tests for reading kinds, payload validation and entry keys."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from roomlog.exceptions import ErrorCode, InvalidKindError
from roomlog.models.entry import LogEntry
from roomlog.models.reading import (
    MotionReading,
    ReadingKind,
    SoundReading,
    TemperatureReading,
    build_reading,
    resolve_kind,
)
from roomlog.models.room import Room
from roomlog.store.entries import EntryStore
from roomlog.store.index import RoomIndex

# ------------------------------------------------------------------
# ReadingKind
# ------------------------------------------------------------------


class TestReadingKind:
    def test_unknown_value_falls_back(self) -> None:
        assert ReadingKind(9) == ReadingKind.UNKNOWN

    def test_known_value(self) -> None:
        assert ReadingKind(2) == ReadingKind.SOUND

    def test_rank_follows_selector(self) -> None:
        assert ReadingKind.TEMPERATURE.rank < ReadingKind.SOUND.rank < ReadingKind.MOTION.rank

    def test_labels(self) -> None:
        assert ReadingKind.TEMPERATURE.label == "TEMP"
        assert ReadingKind.SOUND.label == "DB"
        assert ReadingKind.MOTION.label == "MOTION"
        assert ReadingKind.UNKNOWN.label == "UNKNOWN"

    @pytest.mark.parametrize("selector", [0, 4, 9, -1, "temp", None, True, 1.5])
    def test_resolve_rejects_selectors_outside_closed_set(self, selector: object) -> None:
        with pytest.raises(InvalidKindError) as exc_info:
            resolve_kind(selector)
        assert exc_info.value.code == ErrorCode.INVALID_KIND

    def test_resolve_accepts_member_and_selector(self) -> None:
        assert resolve_kind(ReadingKind.MOTION) is ReadingKind.MOTION
        assert resolve_kind(3) is ReadingKind.MOTION


# ------------------------------------------------------------------
# build_reading
# ------------------------------------------------------------------


class TestBuildReading:
    def test_temperature(self) -> None:
        reading = build_reading(1, 21.5)
        assert isinstance(reading, TemperatureReading)
        assert reading.celsius == 21.5
        assert reading.kind is ReadingKind.TEMPERATURE

    def test_temperature_accepts_integer_value(self) -> None:
        reading = build_reading(ReadingKind.TEMPERATURE, 19)
        assert isinstance(reading, TemperatureReading)
        assert reading.celsius == 19.0

    def test_sound(self) -> None:
        reading = build_reading(2, 40)
        assert isinstance(reading, SoundReading)
        assert reading.decibels == 40

    def test_motion_from_list(self) -> None:
        reading = build_reading(3, [1, 0, 1])
        assert isinstance(reading, MotionReading)
        assert reading.flags == (1, 0, 1)

    @pytest.mark.parametrize(
        "flags",
        [(1, 0), (1, 0, 1, 0), (0, 2, 0), (-1, 0, 0), (True, False, 1.0), ("1", "0", "1")],
    )
    def test_motion_rejects_malformed_flags(self, flags: tuple[int, ...]) -> None:
        with pytest.raises(InvalidKindError):
            build_reading(ReadingKind.MOTION, flags)

    @pytest.mark.parametrize("value", [40.5, 40.0, True, "40"])
    def test_sound_rejects_non_integer_value(self, value: object) -> None:
        with pytest.raises(InvalidKindError):
            build_reading(ReadingKind.SOUND, value)

    @pytest.mark.parametrize("value", ["warm", "21.5", None])
    def test_temperature_rejects_text(self, value: object) -> None:
        with pytest.raises(InvalidKindError):
            build_reading(ReadingKind.TEMPERATURE, value)

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidKindError):
            build_reading(9, 1)

    def test_prebuilt_reading_passes_through(self) -> None:
        reading = SoundReading(decibels=70)
        assert build_reading(ReadingKind.SOUND, reading) is reading

    def test_prebuilt_reading_kind_mismatch(self) -> None:
        with pytest.raises(InvalidKindError):
            build_reading(ReadingKind.TEMPERATURE, SoundReading(decibels=70))

    def test_readings_are_frozen(self) -> None:
        reading = build_reading(1, 20.0)
        with pytest.raises(ValidationError):
            reading.celsius = 25.0  # type: ignore[misc]


# ------------------------------------------------------------------
# LogEntry
# ------------------------------------------------------------------


def _room(name: str) -> Room:
    return Room(name, RoomIndex(EntryStore(4), 4))


def test_entry_sort_key_is_room_kind_timestamp() -> None:
    room = _room("Kitchen")
    entry = LogEntry(room=room, reading=build_reading(2, 40), timestamp=50)

    assert entry.kind is ReadingKind.SOUND
    assert entry.sort_key == ("Kitchen", 2, 50)


def test_entry_keeps_room_identity() -> None:
    room = _room("Den")
    entry = LogEntry(room=room, reading=build_reading(1, 20.0), timestamp=1)

    assert entry.room is room
