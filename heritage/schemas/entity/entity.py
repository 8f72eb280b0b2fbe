"""Entity schema.

An entity is what a user creates during upload: the uploaded files, how they
were processed, and the digital entity that describes them.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from heritage.schemas.annotation.annotation import Annotation
from heritage.schemas.document import Document, LinkSpec, Resolvable
from heritage.schemas.entity.settings import EntitySettings
from heritage.schemas.entity.whitelist import Whitelist
from heritage.schemas.enums import RecordKind
from heritage.schemas.metadata.digital_entity import DigitalEntity
from heritage.schemas.tuples import File
from heritage.schemas.users.user_data import StrippedUserData

_PART_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class DataSource(BaseModel):
    model_config = _PART_CONFIG

    is_external: bool = Field(False, alias="isExternal")
    service: str = Field("", examples=["kompakkt", "sketchfab"])


class ProcessedFiles(BaseModel):
    """Paths of the processed variants, from preview quality to the raw upload."""

    model_config = _PART_CONFIG

    low: str = Field("")
    medium: str = Field("")
    high: str = Field("")
    raw: str = Field("")


class Entity(Document):
    """Uploaded object with its files, viewer settings and annotations.

    Examples:
        >>> entity = Entity.model_validate(
        ...     {
        ...         "_id": "e1",
        ...         "name": "Bust scan",
        ...         "mediaType": "model",
        ...         "online": True,
        ...         "finished": True,
        ...         "relatedDigitalEntity": {"_id": "d1"},
        ...     }
        ... )
        >>> entity.related_digital_entity.id
        'd1'
    """

    linked_fields: ClassVar = {
        "relatedDigitalEntity": LinkSpec(RecordKind.DIGITAL_ENTITY, "one"),
        "annotations": LinkSpec(RecordKind.ANNOTATION, "map"),
    }

    name: str = Field(..., min_length=1)

    files: list[File] = Field(default_factory=list)
    external_file: str | None = Field(None, alias="externalFile")

    related_digital_entity: Resolvable[DigitalEntity] = Field(..., alias="relatedDigitalEntity")

    creator: StrippedUserData | None = Field(None)

    online: bool = Field(...)
    finished: bool = Field(...)

    media_type: str = Field(..., alias="mediaType", examples=["model", "image", "video", "audio"])

    data_source: DataSource = Field(default_factory=DataSource, alias="dataSource")
    processed: ProcessedFiles = Field(default_factory=ProcessedFiles)
    settings: EntitySettings | None = Field(None)

    whitelist: Whitelist = Field(default_factory=Whitelist)
    annotations: dict[str, Resolvable[Annotation]] = Field(default_factory=dict)

    extensions: dict[str, Any] | None = Field(None)
