"""Small value records embedded in metadata entities.

These carry no identifier of their own; they only exist inside the record
that holds them.
"""

from pydantic import BaseModel, ConfigDict, Field

from heritage.schemas.core.address import Address
from heritage.schemas.document import Resolvable

_VALUE_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class TypeValueTuple(BaseModel):
    """Typed value, e.g. an external identifier (``{"type": "DOI", "value": "..."}``)."""

    model_config = _VALUE_CONFIG

    type: str = Field("", description="Kind of the value", examples=["DOI", "inventory"])
    value: str = Field("", description="The value itself")


class DimensionTuple(BaseModel):
    """Measured dimension of an object."""

    model_config = _VALUE_CONFIG

    type: str = Field("", description="Dimension type", examples=["height", "weight"])
    value: str = Field("", description="Measured value")
    name: str = Field("", description="Unit or label", examples=["cm", "kg"])


class CreationTuple(BaseModel):
    """One step of the creation history of a digital object."""

    model_config = _VALUE_CONFIG

    technique: str = Field("", examples=["photogrammetry", "laser scan"])
    program: str = Field("", examples=["Agisoft Metashape"])
    equipment: str = Field("", examples=["Nikon D850"])
    date: str = Field("", examples=["2019-05-14"])


class DescriptionValueTuple(BaseModel):
    """Value with a human-readable description (links, citations, misc)."""

    model_config = _VALUE_CONFIG

    description: str = Field("", description="What the value is")
    value: str = Field("", description="The value itself")


class PlaceTuple(BaseModel):
    """Where a physical object is located."""

    model_config = _VALUE_CONFIG

    name: str = Field("", description="Place name", examples=["Museum für Kunst"])
    geopolarea: str = Field("", description="Geopolitical area", examples=["Germany"])
    address: Resolvable[Address] | None = Field(
        None,
        description="Postal address of the place (resolved or reference)",
    )


class File(BaseModel):
    """Descriptor of an uploaded file."""

    model_config = _VALUE_CONFIG

    file_name: str = Field(..., min_length=1, examples=["statue.glb"])
    file_link: str = Field(..., description="Path or URL of the file")
    file_size: int = Field(0, ge=0, description="Size in bytes")
    file_format: str = Field("", examples=[".glb", ".jpg"])
