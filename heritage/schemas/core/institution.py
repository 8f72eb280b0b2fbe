"""Institution schema."""

from typing import ClassVar

from pydantic import Field

from heritage.schemas.core.address import Address
from heritage.schemas.document import Document, LinkSpec, Resolvable
from heritage.schemas.enums import RecordKind
from heritage.schemas.related_map import RelatedMap


class Institution(Document):
    """Institution (museum, archive, university) involved with an object.

    Roles, notes and addresses can differ per metadata entity and are kept in
    related maps keyed by the entity's identifier.
    """

    linked_fields: ClassVar = {
        "addresses": LinkSpec(RecordKind.ADDRESS, "map"),
    }

    name: str = Field(..., min_length=1, examples=["Universität zu Köln"])
    university: str = Field("", description="Parent university, if any")

    roles: RelatedMap[list[str]] = Field(
        default_factory=dict,
        description="Roles per metadata entity identifier",
    )
    notes: RelatedMap[str] = Field(
        default_factory=dict,
        description="Notes per metadata entity identifier",
    )
    addresses: RelatedMap[Resolvable[Address]] = Field(
        ...,
        description="Address per metadata entity identifier",
    )
