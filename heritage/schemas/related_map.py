"""Related-map container.

A related map associates the identifier of a metadata entity with whatever
data a record holds about it (roles, notes, nested references). Keys are
optional: an absent key, or a key mapped to ``None``, means no relation was
recorded and is never an error.
"""

from collections.abc import Callable, Iterator, Mapping
from typing import Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

RelatedMap = dict[str, Optional[T]]


def get_related(related: Mapping[str, T | None] | None, entity_id: str) -> T | None:
    """Return the data recorded for ``entity_id``, or None when nothing is recorded."""
    if not related:
        return None
    return related.get(entity_id)


def has_relation(related: Mapping[str, T | None] | None, entity_id: str) -> bool:
    """Return True if a relation to ``entity_id`` is recorded."""
    return get_related(related, entity_id) is not None


def related_ids(related: Mapping[str, T | None] | None) -> Iterator[str]:
    """Yield the identifiers with a recorded relation."""
    if not related:
        return
    for entity_id, value in related.items():
        if value is not None:
            yield entity_id


def map_related(
    related: Mapping[str, T | None] | None,
    transform: Callable[[T], U],
) -> dict[str, U | None]:
    """Apply ``transform`` to every recorded value, keeping unrecorded keys as None.

    Examples:
        >>> map_related({"d1": ["creator"], "d2": None}, len)
        {'d1': 1, 'd2': None}
    """
    if not related:
        return {}
    return {
        entity_id: None if value is None else transform(value)
        for entity_id, value in related.items()
    }
