"""Compilation schema."""

from typing import Any, ClassVar

from pydantic import Field

from heritage.schemas.annotation.annotation import Annotation
from heritage.schemas.document import Document, LinkSpec, Resolvable
from heritage.schemas.entity.entity import Entity
from heritage.schemas.entity.whitelist import Whitelist
from heritage.schemas.enums import RecordKind
from heritage.schemas.users.user_data import StrippedUserData


class Compilation(Document):
    """Curated collection of entities, with its own annotations and access list."""

    linked_fields: ClassVar = {
        "entities": LinkSpec(RecordKind.ENTITY, "map"),
        "annotations": LinkSpec(RecordKind.ANNOTATION, "map"),
    }

    name: str = Field(..., min_length=1)
    description: str = Field(...)
    creator: StrippedUserData | None = Field(None)
    password: str | bool | None = Field(None, repr=False)

    entities: dict[str, Resolvable[Entity]] = Field(...)

    whitelist: Whitelist = Field(default_factory=Whitelist)
    annotations: dict[str, Resolvable[Annotation]] = Field(default_factory=dict)

    extensions: dict[str, Any] | None = Field(None)

    @property
    def is_protected(self) -> bool:
        """Return True if the compilation is password protected."""
        return bool(self.password)
