"""Person schema.

Persons are shared between metadata entities. What a person did for a given
entity (roles, institution, contact) is kept in related maps keyed by the
entity's identifier.
"""

from typing import ClassVar

from pydantic import Field

from heritage.schemas.core.contact import Contact
from heritage.schemas.core.institution import Institution
from heritage.schemas.document import Document, LinkSpec, Resolvable
from heritage.schemas.enums import RecordKind
from heritage.schemas.related_map import RelatedMap


class Person(Document):
    """Person involved in the creation or documentation of an object.

    Examples:
        >>> person = Person.model_validate(
        ...     {
        ...         "_id": "p1",
        ...         "prename": "Ada",
        ...         "name": "Lovelace",
        ...         "roles": {"d1": ["CREATOR"]},
        ...         "institutions": {"d1": [{"_id": "i1"}]},
        ...         "contact_references": {},
        ...     }
        ... )
        >>> person.institutions["d1"][0].id
        'i1'
    """

    linked_fields: ClassVar = {
        "institutions": LinkSpec(RecordKind.INSTITUTION, "map_list"),
        "contact_references": LinkSpec(RecordKind.CONTACT, "map"),
    }

    prename: str = Field(..., description="Given name", examples=["Ada"])
    name: str = Field(..., description="Family name", examples=["Lovelace"])

    roles: RelatedMap[list[str]] = Field(
        default_factory=dict,
        description="Roles per metadata entity identifier",
        examples=[{"5f3e": ["CREATOR", "EDITOR"]}],
    )
    institutions: RelatedMap[list[Resolvable[Institution]]] = Field(
        default_factory=dict,
        description="Institutions the person acted for, per metadata entity identifier",
    )
    contact_references: RelatedMap[Resolvable[Contact]] = Field(
        default_factory=dict,
        description="Contact details per metadata entity identifier",
    )

    @property
    def full_name(self) -> str:
        return f"{self.prename} {self.name}".strip()
