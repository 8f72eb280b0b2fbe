"""Tests for Document, Reference and the Resolvable union."""

import pytest
from pydantic import BaseModel, ValidationError

from heritage.schemas import Address, Document, Entity, Reference, Resolvable
from tests.utils.payloads import entity_payload


class Holder(BaseModel):
    """Minimal model with a single resolvable field."""

    address: Resolvable[Address]


class _ObjectId:
    """Stand-in for a BSON ObjectId: only its string form matters."""

    def __str__(self) -> str:
        return "5f3e1c2a9b1e8a3d4c5b6a7f"


class TestDocument:
    """Test the Document base model."""

    def test_identifier_uses_wire_alias(self) -> None:
        """The identifier should be read from and dumped as _id."""
        document = Document.model_validate({"_id": "abc"})

        assert document.id == "abc"
        assert document.model_dump(by_alias=True) == {"_id": "abc"}

    def test_identifier_populated_by_name(self) -> None:
        """The identifier should also be accepted by attribute name."""
        assert Document(id="abc").id == "abc"

    def test_object_id_is_coerced_to_string(self) -> None:
        """Non-string identifiers should be stored as their string form."""
        document = Document.model_validate({"_id": _ObjectId()})

        assert document.id == "5f3e1c2a9b1e8a3d4c5b6a7f"

    def test_identifier_required(self) -> None:
        """A document without identifier should fail validation."""
        with pytest.raises(ValidationError) as exc_info:
            Document.model_validate({})

        errors = exc_info.value.errors()
        assert any(e["loc"] == ("_id",) for e in errors)

    def test_documents_are_immutable(self) -> None:
        """Assigning to a field should be rejected."""
        document = Document(id="abc")

        with pytest.raises(ValidationError):
            document.id = "other"


class TestReference:
    """Test the Reference model."""

    def test_reference_rejects_extra_keys(self) -> None:
        """A reference carries the identifier only."""
        with pytest.raises(ValidationError):
            Reference.model_validate({"_id": "abc", "name": "Lovelace"})

    def test_reference_dump(self) -> None:
        assert Reference(id="abc").model_dump(by_alias=True) == {"_id": "abc"}

    def test_null_keys_are_dropped(self) -> None:
        reference = Reference.model_validate({"_id": "abc", "name": None})

        assert reference == Reference(id="abc")
        assert reference.model_dump(by_alias=True) == {"_id": "abc"}


class TestResolvable:
    """Test that Resolvable picks the branch from the payload shape."""

    def test_bare_identifier_becomes_reference(self) -> None:
        holder = Holder.model_validate({"address": {"_id": "a1"}})

        assert isinstance(holder.address, Reference)
        assert holder.address.id == "a1"

    def test_full_record_becomes_resolved_model(self) -> None:
        holder = Holder.model_validate(
            {
                "address": {
                    "_id": "a1",
                    "street": "Albertus-Magnus-Platz",
                    "postcode": "50923",
                    "city": "Köln",
                    "country": "Germany",
                }
            }
        )

        assert isinstance(holder.address, Address)
        assert holder.address.city == "Köln"

    def test_partial_record_is_not_coerced_to_reference(self) -> None:
        """A payload with more than _id but missing required fields must fail."""
        with pytest.raises(ValidationError):
            Holder.model_validate({"address": {"_id": "a1", "city": "Köln"}})

    def test_reference_with_null_fields_becomes_reference(self) -> None:
        """Null fields next to the identifier still make a bare reference."""
        entity = Entity.model_validate(
            entity_payload(relatedDigitalEntity={"_id": "d1", "description": None})
        )

        assert entity.related_digital_entity == Reference(id="d1")

    def test_model_instances_are_accepted(self) -> None:
        reference = Reference(id="a1")

        assert Holder(address=reference).address is reference
