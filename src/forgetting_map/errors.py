"""Error types raised by forgetting_map."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an unusable capacity, key or value."""
