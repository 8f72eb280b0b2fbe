"""Fields shared by digital and physical entities.

``BaseEntity`` is never used on its own; a record that only carries these
fields is neither a digital nor a physical entity.
"""

from typing import Any, ClassVar

from pydantic import Field

from heritage.schemas.core.institution import Institution
from heritage.schemas.core.person import Person
from heritage.schemas.document import Document, LinkSpec, Resolvable
from heritage.schemas.enums import RecordKind
from heritage.schemas.tuples import DescriptionValueTuple, File, TypeValueTuple


class BaseEntity(Document):
    """Descriptive metadata common to every metadata entity."""

    linked_fields: ClassVar = {
        "persons": LinkSpec(RecordKind.PERSON, "list"),
        "institutions": LinkSpec(RecordKind.INSTITUTION, "list"),
    }

    title: str = Field(..., description="Title of the object")
    description: str = Field(..., description="Description of the object")

    external_id: list[TypeValueTuple] = Field(
        default_factory=list,
        alias="externalId",
        description="Identifiers in external systems",
    )
    external_link: list[DescriptionValueTuple] = Field(
        default_factory=list,
        alias="externalLink",
        description="Links to external resources",
    )
    biblio_refs: list[DescriptionValueTuple] = Field(
        default_factory=list,
        alias="biblioRefs",
        description="Bibliographic references",
    )
    other: list[DescriptionValueTuple] = Field(default_factory=list)

    persons: list[Resolvable[Person]] = Field(...)
    institutions: list[Resolvable[Institution]] = Field(...)

    metadata_files: list[File] = Field(default_factory=list)

    extensions: dict[str, Any] | None = Field(
        None,
        description="Free-form data added by platform extensions",
    )
