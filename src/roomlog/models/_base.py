"""Base model and enum for roomlog records.

Every record model inherits from :class:`RoomLogBaseModel`, which is frozen
and rejects unknown fields.

Selector enums inherit from :class:`RoomLogEnum` which adds an ``UNKNOWN``
member at ``-1`` and a ``_missing_`` hook that returns ``UNKNOWN``
for any value without a mapped member.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class RoomLogEnum(enum.IntEnum):
    """Base for integer selector enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    Selectors without a mapped member resolve to ``UNKNOWN`` instead of
    raising ``ValueError``, so callers reject them with a domain error.
    """

    @classmethod
    def _missing_(cls, value: object) -> RoomLogEnum:
        # pylint: disable=no-member
        unknown: RoomLogEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class RoomLogBaseModel(BaseModel):
    """Base for immutable roomlog records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
