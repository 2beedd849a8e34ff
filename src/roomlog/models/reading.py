"""Sensor reading kinds and their payload models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, StrictInt, ValidationError

from roomlog.exceptions import InvalidKindError
from roomlog.models._base import RoomLogBaseModel, RoomLogEnum

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class ReadingKind(RoomLogEnum):
    """Reading kind selector.

    The integer value doubles as the kind's rank in the composite sort key.
    """

    UNKNOWN = -1
    TEMPERATURE = 1
    SOUND = 2
    MOTION = 3

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return _KIND_LABELS.get(self, "UNKNOWN")


_KIND_LABELS: dict[ReadingKind, str] = {
    ReadingKind.TEMPERATURE: "TEMP",
    ReadingKind.SOUND: "DB",
    ReadingKind.MOTION: "MOTION",
}

# ------------------------------------------------------------------
# Payloads
# ------------------------------------------------------------------

MotionFlag = Annotated[StrictInt, Field(ge=0, le=1)]


class TemperatureReading(RoomLogBaseModel):
    """Temperature in degrees Celsius."""

    kind: Literal[ReadingKind.TEMPERATURE] = ReadingKind.TEMPERATURE
    celsius: float = Field(strict=True)


class SoundReading(RoomLogBaseModel):
    """Sound level in decibels."""

    kind: Literal[ReadingKind.SOUND] = ReadingKind.SOUND
    decibels: StrictInt


class MotionReading(RoomLogBaseModel):
    """Three motion detector flags, each 0 or 1."""

    kind: Literal[ReadingKind.MOTION] = ReadingKind.MOTION
    flags: tuple[MotionFlag, MotionFlag, MotionFlag]


Reading = TemperatureReading | SoundReading | MotionReading

_PAYLOAD_FIELDS: dict[ReadingKind, tuple[type[RoomLogBaseModel], str]] = {
    ReadingKind.TEMPERATURE: (TemperatureReading, "celsius"),
    ReadingKind.SOUND: (SoundReading, "decibels"),
    ReadingKind.MOTION: (MotionReading, "flags"),
}


def resolve_kind(kind: Any) -> ReadingKind:
    """Map a selector (``1``-``3`` or a :class:`ReadingKind`) to a known kind.

    Raises :class:`InvalidKindError` for anything outside the closed set.
    """
    if isinstance(kind, bool):
        resolved = ReadingKind.UNKNOWN
    elif isinstance(kind, ReadingKind):
        resolved = kind
    else:
        resolved = ReadingKind(kind)
    if resolved is ReadingKind.UNKNOWN:
        raise InvalidKindError(f"unknown reading kind: {kind!r}")
    return resolved


def build_reading(kind: Any, payload: Any) -> Reading:
    """Validate *payload* against the shape required by *kind*.

    *payload* is a float for temperature, an int for sound level and a
    sequence of three 0/1 flags for motion. A ready-made reading model is
    accepted as long as its kind matches.
    """
    resolved = resolve_kind(kind)
    model_cls, field_name = _PAYLOAD_FIELDS[resolved]

    if isinstance(payload, (TemperatureReading, SoundReading, MotionReading)):
        if payload.kind is not resolved:
            raise InvalidKindError(f"{payload.kind.name.lower()} payload given for {resolved.name.lower()} reading")
        return payload

    try:
        reading: Reading = model_cls.model_validate({field_name: payload})  # type: ignore[assignment]
    except ValidationError as exc:
        raise InvalidKindError(f"malformed {resolved.name.lower()} payload: {payload!r}") from exc
    return reading
