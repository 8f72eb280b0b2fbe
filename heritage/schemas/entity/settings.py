"""Viewer settings stored with an entity."""

from pydantic import BaseModel, ConfigDict, Field

from heritage.schemas.vector import Vector3

_SETTINGS_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

Position = Vector3


class Color(BaseModel):
    model_config = _SETTINGS_CONFIG

    r: float = Field(0, ge=0, le=255)
    g: float = Field(0, ge=0, le=255)
    b: float = Field(0, ge=0, le=255)
    a: float = Field(1, ge=0, le=1)


class EntityLight(BaseModel):
    model_config = _SETTINGS_CONFIG

    type: str = Field(..., examples=["HemisphericLight", "PointLight"])
    position: Position = Field(...)
    intensity: float = Field(1.0, ge=0)


class CameraPositionInitial(BaseModel):
    model_config = _SETTINGS_CONFIG

    position: Position = Field(...)
    target: Position = Field(...)


class Background(BaseModel):
    model_config = _SETTINGS_CONFIG

    color: Color = Field(default_factory=Color)
    effect: bool = Field(False)


class EntitySettings(BaseModel):
    """How the viewer presents an entity (camera, background, lights, transform)."""

    model_config = _SETTINGS_CONFIG

    position: Position | None = Field(None)
    preview: str = Field("", description="Preview image (path or data URL)")
    camera_position_initial: CameraPositionInitial | None = Field(
        None, alias="cameraPositionInitial"
    )
    background: Background = Field(default_factory=Background)
    lights: list[EntityLight] = Field(default_factory=list)
    rotation: Position = Field(default_factory=lambda: Vector3(x=0, y=0, z=0))
    scale: float = Field(1.0, gt=0)
    translate: Position | None = Field(None)
