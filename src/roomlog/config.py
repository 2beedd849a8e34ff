"""Store configuration for roomlog."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from roomlog._constants import DEFAULT_CAPACITY, DEFAULT_MAX_NAME_LENGTH
from roomlog.exceptions import RoomLogConfigError

_ENV_INT_MAP = {
    "ROOMLOG_CAPACITY": "capacity",
    "ROOMLOG_MAX_NAME_LENGTH": "max_name_length",
}


@dataclasses.dataclass(frozen=True)
class RoomLogConfig:
    """Bounds applied by a :class:`roomlog.manager.RoomLog`.

    Parameters
    ----------
    capacity : int
        Maximum number of rooms in the registry, entries in the store, and
        references in any single room index. All three share this bound.
    max_name_length : int
        Maximum room name length in bytes of its UTF-8 encoding.
    """

    capacity: int = DEFAULT_CAPACITY
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise RoomLogConfigError(f"{field.name} must be an integer, got {value!r}")
            if value <= 0:
                raise RoomLogConfigError(f"{field.name} must be positive, got {value}")

    @classmethod
    def from_env(cls, **overrides: Any) -> RoomLogConfig:
        """Create configuration from environment variables.

        Reads ``ROOMLOG_CAPACITY`` and ``ROOMLOG_MAX_NAME_LENGTH``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RoomLogConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = int(val)
            except ValueError as exc:
                raise RoomLogConfigError(f"{env_key} must be an integer, got {val!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
