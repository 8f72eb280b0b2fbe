"""Tests for the Vector3 schema and legacy vector normalisation."""

import pytest
from pydantic import ValidationError

from heritage.schemas import Vector3, as_vector3


class TestAsVector3:
    """Test as_vector3 across both wire encodings."""

    def test_legacy_encoding_is_normalized(self) -> None:
        vector = as_vector3({"_x": 1, "_y": 2, "_z": 3})

        assert vector.model_dump() == {"x": 1.0, "y": 2.0, "z": 3.0}

    def test_canonical_encoding_passes_through(self) -> None:
        vector = as_vector3({"x": 1.5, "y": -2, "z": 0})

        assert vector.model_dump() == {"x": 1.5, "y": -2.0, "z": 0.0}

    def test_vector_instance_returned_unchanged(self) -> None:
        vector = Vector3(x=1, y=2, z=3)

        assert as_vector3(vector) is vector

    def test_legacy_fields_win_when_both_encodings_present(self) -> None:
        vector = as_vector3({"x": 9, "y": 9, "z": 9, "_x": 1, "_y": 2, "_z": 3})

        assert (vector.x, vector.y, vector.z) == (1.0, 2.0, 3.0)

    def test_partial_legacy_encoding_is_not_completed(self) -> None:
        """Missing legacy coordinates must not be filled with defaults."""
        with pytest.raises(ValidationError) as exc_info:
            as_vector3({"_x": 1, "_z": 3})

        errors = exc_info.value.errors()
        assert any(e["loc"] == ("y",) for e in errors)

    def test_vectors_are_immutable(self) -> None:
        vector = Vector3(x=1, y=2, z=3)

        with pytest.raises(ValidationError):
            vector.x = 4
