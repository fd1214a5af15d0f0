"""Thread-safe fixed-capacity cache that forgets its least recently used entry."""

from .cache import Cache, LRUCache
from .config import CAPACITY_ENV_VAR, DEFAULT_CAPACITY, LRUCacheConfig, validate_capacity
from .errors import InvalidArgumentError
from .recency import RecencyList

__all__ = [
    "Cache",
    "LRUCache",
    "LRUCacheConfig",
    "CAPACITY_ENV_VAR",
    "DEFAULT_CAPACITY",
    "validate_capacity",
    "InvalidArgumentError",
    "RecencyList",
]
