"""Resolution depth arithmetic.

Entity graphs are mutually recursive and may contain cycles (a person links
institutions, a digital entity links physical entities that link back).
Expansion is bounded by an explicit depth that drops by one per level and
stops at zero, which also ends traversal of cycles without tracking visited
identifiers.
"""

MAX_RESOLUTION_DEPTH = 10


def clamp_depth(depth: int, maximum: int = MAX_RESOLUTION_DEPTH) -> int:
    """Return ``depth`` limited to ``0..maximum`` (itself capped at MAX_RESOLUTION_DEPTH).

    Examples:
        >>> clamp_depth(-3), clamp_depth(4), clamp_depth(99)
        (0, 4, 10)
    """
    upper = min(max(maximum, 0), MAX_RESOLUTION_DEPTH)
    return min(max(depth, 0), upper)


def decrement_depth(depth: int) -> int:
    """Return the depth for the next nesting level, floored at zero.

    Examples:
        >>> decrement_depth(2), decrement_depth(0)
        (1, 0)
    """
    return max(clamp_depth(depth) - 1, 0)


def is_exhausted(depth: int) -> bool:
    """Return True if no further nested references may be expanded."""
    return clamp_depth(depth) == 0
