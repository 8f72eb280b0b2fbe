"""Physical entity schema."""

from typing import ClassVar

from pydantic import Field

from heritage.schemas.document import LinkSpec
from heritage.schemas.enums import RecordKind
from heritage.schemas.metadata.base_entity import BaseEntity
from heritage.schemas.tuples import PlaceTuple


class PhysicalEntity(BaseEntity):
    """A physical object, e.g. a statue held by a museum.

    Examples:
        >>> obj = PhysicalEntity.model_validate(
        ...     {
        ...         "_id": "ph1",
        ...         "title": "Bust",
        ...         "description": "Marble bust",
        ...         "persons": [],
        ...         "institutions": [],
        ...         "place": {"name": "Depot", "address": {"_id": "a1"}},
        ...         "collection": "Antiquities",
        ...     }
        ... )
        >>> obj.place.address.id
        'a1'
    """

    linked_fields: ClassVar = {
        **BaseEntity.linked_fields,
        "place.address": LinkSpec(RecordKind.ADDRESS, "one"),
    }

    place: PlaceTuple = Field(..., description="Where the object is kept")
    collection: str = Field(..., description="Collection the object belongs to")
