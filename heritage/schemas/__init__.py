"""Pydantic schemas for the heritage data model.

Every record extends Document. Fields that point at another linkable record
accept either the resolved record or a bare Reference (see Resolvable).
"""

from heritage.schemas.annotation import (
    Agent,
    Annotation,
    Body,
    CameraPerspective,
    Content,
    Selector,
    Source,
    Target,
)
from heritage.schemas.core import Address, Contact, Institution, Person, Tag
from heritage.schemas.document import Document, LinkSpec, Reference, Resolvable
from heritage.schemas.entity import (
    Color,
    Compilation,
    DataSource,
    Entity,
    EntityLight,
    EntitySettings,
    Position,
    ProcessedFiles,
    Whitelist,
)
from heritage.schemas.enums import LINKABLE_KINDS, Collection, RecordKind, UserRank
from heritage.schemas.metadata import BaseEntity, DigitalEntity, PhysicalEntity
from heritage.schemas.registry import MODEL_REGISTRY, model_for
from heritage.schemas.related_map import (
    RelatedMap,
    get_related,
    has_relation,
    map_related,
    related_ids,
)
from heritage.schemas.tuples import (
    CreationTuple,
    DescriptionValueTuple,
    DimensionTuple,
    File,
    PlaceTuple,
    TypeValueTuple,
)
from heritage.schemas.users import Group, StrippedUserData, UserData
from heritage.schemas.vector import Vector3, as_vector3

__all__ = [
    "LINKABLE_KINDS",
    "MODEL_REGISTRY",
    "Address",
    "Agent",
    "Annotation",
    "BaseEntity",
    "Body",
    "CameraPerspective",
    "Collection",
    "Color",
    "Compilation",
    "Contact",
    "Content",
    "CreationTuple",
    "DataSource",
    "DescriptionValueTuple",
    "DigitalEntity",
    "DimensionTuple",
    "Document",
    "Entity",
    "EntityLight",
    "EntitySettings",
    "File",
    "Group",
    "Institution",
    "LinkSpec",
    "Person",
    "PhysicalEntity",
    "PlaceTuple",
    "Position",
    "ProcessedFiles",
    "RecordKind",
    "Reference",
    "RelatedMap",
    "Resolvable",
    "Selector",
    "Source",
    "StrippedUserData",
    "Tag",
    "Target",
    "TypeValueTuple",
    "UserData",
    "UserRank",
    "Vector3",
    "Whitelist",
    "as_vector3",
    "get_related",
    "has_relation",
    "map_related",
    "model_for",
    "related_ids",
]
