"""Annotation schema.

An annotation marks a point on a 3D object (the target) and attaches content
to it (the body), optionally with the camera perspective it was made from.
Every embedded vector is normalised to ``x``/``y``/``z`` on validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from heritage.schemas.document import Document
from heritage.schemas.vector import Vector3

_PART_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class Agent(Document):
    """Person or software that created or changed an annotation."""

    type: str = Field("", examples=["person", "software"])
    name: str = Field("")
    homepage: str | None = Field(None)


class CameraPerspective(BaseModel):
    """Camera position and target the annotation was made from."""

    model_config = _PART_CONFIG

    camera_type: str = Field("", alias="cameraType", examples=["arcRotateCam"])
    position: Vector3 = Field(...)
    target: Vector3 = Field(...)
    preview: str = Field("", description="Preview image (path or data URL)")


class Content(BaseModel):
    """Annotation content. Unknown keys are kept as extra fields."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    type: str = Field("", examples=["text"])
    title: str = Field("")
    description: str = Field("")
    link: str | None = Field(None)
    related_perspective: CameraPerspective | None = Field(None, alias="relatedPerspective")


class Body(BaseModel):
    model_config = _PART_CONFIG

    type: str = Field("", examples=["annotation"])
    content: Content = Field(...)


class Source(BaseModel):
    """Entity (and optionally compilation) the annotation belongs to."""

    model_config = _PART_CONFIG

    link: str | None = Field(None)
    related_entity: str = Field(..., alias="relatedEntity")
    related_compilation: str | None = Field(None, alias="relatedCompilation")


class Selector(BaseModel):
    """Point on the object surface and its normal."""

    model_config = _PART_CONFIG

    reference_point: Vector3 = Field(..., alias="referencePoint")
    reference_normal: Vector3 = Field(..., alias="referenceNormal")


class Target(BaseModel):
    model_config = _PART_CONFIG

    source: Source = Field(...)
    selector: Selector = Field(...)


class Annotation(Document):
    """Annotation placed on an entity.

    Examples:
        >>> annotation = Annotation.model_validate(
        ...     {
        ...         "_id": "an1",
        ...         "body": {"type": "annotation", "content": {"title": "Crack"}},
        ...         "target": {
        ...             "source": {"relatedEntity": "e1"},
        ...             "selector": {
        ...                 "referencePoint": {"_x": 1, "_y": 2, "_z": 3},
        ...                 "referenceNormal": {"x": 0, "y": 1, "z": 0},
        ...             },
        ...         },
        ...     }
        ... )
        >>> annotation.target.selector.reference_point
        Vector3(x=1.0, y=2.0, z=3.0)
    """

    validated: bool = Field(False, description="Whether the annotation was reviewed")

    identifier: str = Field("")
    ranking: int = Field(0, description="Display order within the annotated record")
    creator: Agent | None = Field(None)
    created: str = Field("")
    generator: Agent | None = Field(None)
    generated: str | None = Field(None)
    motivation: str = Field("", examples=["commenting"])
    last_modification_date: str | None = Field(None, alias="lastModificationDate")
    last_modified_by: Agent | None = Field(None, alias="lastModifiedBy")

    position_x_on_view: float | None = Field(None, alias="positionXOnView")
    position_y_on_view: float | None = Field(None, alias="positionYOnView")

    body: Body = Field(...)
    target: Target = Field(...)
