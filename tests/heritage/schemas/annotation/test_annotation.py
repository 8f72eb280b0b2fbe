"""Tests for the Annotation schema."""

import pytest
from pydantic import ValidationError

from heritage.schemas import Annotation, Vector3
from tests.utils.payloads import annotation_payload


class TestAnnotation:
    """Test suite for Annotation."""

    def test_annotation_valid(self) -> None:
        annotation = Annotation.model_validate(annotation_payload())

        assert annotation.validated is True
        assert annotation.creator.name == "Ada Lovelace"
        assert annotation.target.source.related_entity == "e1"
        assert annotation.target.source.related_compilation is None

    def test_selector_vectors_are_normalized(self) -> None:
        selector = Annotation.model_validate(annotation_payload()).target.selector

        assert selector.reference_point == Vector3(x=0.5, y=1.5, z=-2)
        assert selector.reference_normal == Vector3(x=0, y=1, z=0)

    def test_camera_perspective_vectors_are_normalized(self) -> None:
        perspective = Annotation.model_validate(annotation_payload()).body.content.related_perspective

        assert perspective.camera_type == "arcRotateCam"
        assert perspective.position == Vector3(x=1, y=2, z=3)
        assert perspective.target == Vector3(x=0, y=0, z=0)

    def test_content_keeps_unknown_keys(self) -> None:
        payload = annotation_payload()
        payload["body"]["content"]["externalReference"] = "urn:x"

        content = Annotation.model_validate(payload).body.content

        assert content.model_extra == {"externalReference": "urn:x"}

    def test_annotation_requires_target(self) -> None:
        payload = annotation_payload()
        del payload["target"]

        with pytest.raises(ValidationError) as exc_info:
            Annotation.model_validate(payload)

        assert any(e["loc"] == ("target",) for e in exc_info.value.errors())

    def test_partial_legacy_vector_fails(self) -> None:
        payload = annotation_payload()
        payload["target"]["selector"]["referencePoint"] = {"_x": 1, "_y": 2}

        with pytest.raises(ValidationError):
            Annotation.model_validate(payload)

    def test_dump_uses_canonical_vectors(self) -> None:
        dumped = Annotation.model_validate(annotation_payload()).model_dump(by_alias=True)

        assert dumped["target"]["selector"]["referencePoint"] == {"x": 0.5, "y": 1.5, "z": -2.0}
