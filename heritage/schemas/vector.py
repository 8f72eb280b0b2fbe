"""Three-dimensional vector schema.

Vectors reach the model in two encodings: canonical ``x``/``y``/``z`` or the
legacy ``_x``/``_y``/``_z`` produced by older viewer serialisation. Both are
normalised to the canonical shape during validation.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

_LEGACY_KEYS = ("_x", "_y", "_z")
_CANONICAL_KEYS = ("x", "y", "z")


class Vector3(BaseModel):
    """A point or direction in 3D space.

    Examples:
        >>> Vector3.model_validate({"_x": 1, "_y": 2, "_z": 3})
        Vector3(x=1.0, y=2.0, z=3.0)
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")
    z: float = Field(..., description="Z coordinate")

    @model_validator(mode="before")
    @classmethod
    def normalize_legacy_encoding(cls, data: Any) -> Any:
        """Read ``_x``/``_y``/``_z`` when ``_x`` is present, ignoring any canonical keys.

        A partial legacy encoding is not completed with defaults; the missing
        coordinate fails validation instead.
        """
        if isinstance(data, Mapping) and "_x" in data:
            return {
                canonical: data[legacy]
                for legacy, canonical in zip(_LEGACY_KEYS, _CANONICAL_KEYS)
                if legacy in data
            }
        return data


def as_vector3(vector: Vector3 | Mapping[str, Any]) -> Vector3:
    """Return the canonical form of a vector in either wire encoding.

    A ``Vector3`` is returned unchanged.

    Raises:
        pydantic.ValidationError: If the input lacks a coordinate of its encoding.
    """
    if isinstance(vector, Vector3):
        return vector
    return Vector3.model_validate(vector)
