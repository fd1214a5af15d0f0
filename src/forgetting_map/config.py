"""Configuration for forgetting_map caches."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidArgumentError

DEFAULT_CAPACITY = 1024
CAPACITY_ENV_VAR = "FORGETTING_MAP_CAPACITY"


def validate_capacity(capacity: Any) -> int:
    """Return ``capacity`` if it is a positive integer, else raise."""

    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(f"Capacity must be an integer, got {type(capacity).__name__}")
    if capacity <= 0:
        raise InvalidArgumentError("Capacity for the cache must be greater than 0")
    return capacity


def _parse_capacity(raw: Any) -> int:
    if isinstance(raw, str):
        try:
            raw = int(raw.strip())
        except ValueError as exc:
            raise InvalidArgumentError(f"Capacity must be an integer, got {raw!r}") from exc
    return validate_capacity(raw)


@dataclass(frozen=True)
class LRUCacheConfig:
    """Settings used to build an :class:`~forgetting_map.cache.LRUCache`."""

    capacity: int = DEFAULT_CAPACITY

    def __post_init__(self) -> None:
        validate_capacity(self.capacity)

    @classmethod
    def from_env(cls, *, capacity: int | None = None) -> "LRUCacheConfig":
        """Build config using environment overrides if provided."""

        capacity_env = os.environ.get(CAPACITY_ENV_VAR)
        if capacity_env is not None:
            resolved = _parse_capacity(capacity_env)
        elif capacity is not None:
            resolved = validate_capacity(capacity)
        else:
            resolved = DEFAULT_CAPACITY
        return cls(capacity=resolved)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "LRUCacheConfig":
        return cls(capacity=_parse_capacity(raw.get("capacity", DEFAULT_CAPACITY)))
