"""Digital entity schema."""

from typing import ClassVar

from pydantic import Field

from heritage.schemas.core.tag import Tag
from heritage.schemas.document import LinkSpec, Resolvable
from heritage.schemas.enums import RecordKind
from heritage.schemas.metadata.base_entity import BaseEntity
from heritage.schemas.metadata.physical_entity import PhysicalEntity
from heritage.schemas.tuples import CreationTuple, DimensionTuple, File


class DigitalEntity(BaseEntity):
    """A digital object (3D model, image, audio, video) and its provenance.

    ``phy_objs`` lists the physical objects the digital object depicts.
    """

    linked_fields: ClassVar = {
        **BaseEntity.linked_fields,
        "tags": LinkSpec(RecordKind.TAG, "list"),
        "phyObjs": LinkSpec(RecordKind.PHYSICAL_ENTITY, "list"),
    }

    type: str = Field(..., description="Media type of the object", examples=["model", "image"])
    licence: str = Field(..., description="Licence identifier", examples=["BY-SA", "CC0"])

    discipline: list[str] = Field(default_factory=list, examples=[["Archaeology"]])
    tags: list[Resolvable[Tag]] = Field(default_factory=list)

    dimensions: list[DimensionTuple] = Field(default_factory=list)
    creation: list[CreationTuple] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)

    statement: str = Field("", description="Rights statement")
    objecttype: str = Field("", description="Object type vocabulary term")

    phy_objs: list[Resolvable[PhysicalEntity]] = Field(
        default_factory=list,
        alias="phyObjs",
        description="Physical objects depicted by this digital object",
    )
