"""Depth-bounded resolution of nested references."""

from heritage.resolution.depth import (
    MAX_RESOLUTION_DEPTH,
    clamp_depth,
    decrement_depth,
    is_exhausted,
)
from heritage.resolution.resolver import RecordLookup, ResolutionError, Resolver, to_reference

__all__ = [
    "MAX_RESOLUTION_DEPTH",
    "RecordLookup",
    "ResolutionError",
    "Resolver",
    "clamp_depth",
    "decrement_depth",
    "is_exhausted",
    "to_reference",
]
