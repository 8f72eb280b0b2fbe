"""Structural predicates for untagged wire payloads.

Records arrive without a type tag, so every predicate recognises a variant by
the presence of its signature fields. A field counts as defined when the key
is present and its value is not ``None``.

All predicates are total: they accept any object, never raise, and answer
``False`` for anything that is not a mapping or a pydantic model.

Some signatures are supersets of others (a digital entity is also a metadata
entity), and an unrelated record that happens to carry the same field names
passes the same check. That is a known limit of tag-less payloads; use
:func:`heritage.typeguards.classifier.classify` to get an explicit tag once
and branch on it downstream.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

ID_FIELD = "_id"

GROUP_SIGNATURE = ("name", "creator", "owners", "members")
TAG_SIGNATURE = ("value",)
METADATA_ENTITY_SIGNATURE = ("title", "description", "persons", "institutions")
DIGITAL_ENTITY_SIGNATURE = ("type", "licence")
PHYSICAL_ENTITY_SIGNATURE = ("place", "collection")
COMPILATION_SIGNATURE = ("entities", "name", "description")
ENTITY_SIGNATURE = ("name", "mediaType", "online", "finished")
ANNOTATION_SIGNATURE = ("body", "target")
PERSON_SIGNATURE = ("prename", "name")
INSTITUTION_SIGNATURE = ("name", "addresses")
ADDRESS_SIGNATURE = ("street", "postcode", "city", "country")
CONTACT_SIGNATURE = ("mail", "phonenumber")


def defined_fields(value: Any) -> dict[str, Any] | None:
    """Return the defined wire-named fields of ``value``, or None if it has none.

    Mappings are read as-is. Pydantic models are read through their aliases,
    shallowly, so a nested record stays the model instance it already is.
    """
    if isinstance(value, BaseModel):
        fields: dict[str, Any] = {}
        for name, info in type(value).model_fields.items():
            field_value = getattr(value, name, None)
            if field_value is not None:
                fields[info.alias or name] = field_value
        for name, field_value in (value.model_extra or {}).items():
            if field_value is not None:
                fields[name] = field_value
        return fields

    if isinstance(value, Mapping):
        return {key: item for key, item in value.items() if item is not None}

    return None


def _has_all(value: Any, signature: tuple[str, ...]) -> bool:
    fields = defined_fields(value)
    if fields is None:
        return False
    return all(key in fields for key in signature)


def is_unresolved(value: Any) -> bool:
    """Return True if ``value`` is a bare reference (its only defined key is ``_id``)."""
    fields = defined_fields(value)
    if fields is None:
        return False
    return list(fields) == [ID_FIELD]


def is_group(value: Any) -> bool:
    return _has_all(value, GROUP_SIGNATURE)


def is_tag(value: Any) -> bool:
    return _has_all(value, TAG_SIGNATURE)


def is_metadata_entity(value: Any) -> bool:
    """Return True if ``value`` carries the fields shared by digital and physical entities."""
    return _has_all(value, METADATA_ENTITY_SIGNATURE)


def is_digital_entity(value: Any) -> bool:
    """Return True if ``value`` is a metadata entity with ``type`` and ``licence``."""
    return is_metadata_entity(value) and _has_all(value, DIGITAL_ENTITY_SIGNATURE)


def is_physical_entity(value: Any) -> bool:
    """Return True if ``value`` is a metadata entity with ``place`` and ``collection``."""
    return is_metadata_entity(value) and _has_all(value, PHYSICAL_ENTITY_SIGNATURE)


def is_compilation(value: Any) -> bool:
    return _has_all(value, COMPILATION_SIGNATURE)


def is_entity(value: Any) -> bool:
    return _has_all(value, ENTITY_SIGNATURE)


def is_resolved_entity(value: Any) -> bool:
    """Return True if the related digital entity of an entity is itself resolved.

    A bare reference, or an entity whose ``relatedDigitalEntity`` is only a
    reference, does not count as resolved.
    """
    fields = defined_fields(value)
    if fields is None:
        return False
    related = defined_fields(fields.get("relatedDigitalEntity"))
    if related is None:
        return False
    return "description" in related


def is_annotation(value: Any) -> bool:
    return _has_all(value, ANNOTATION_SIGNATURE)


def is_person(value: Any) -> bool:
    return _has_all(value, PERSON_SIGNATURE)


def is_institution(value: Any) -> bool:
    return _has_all(value, INSTITUTION_SIGNATURE)


def is_address(value: Any) -> bool:
    return _has_all(value, ADDRESS_SIGNATURE)


def is_contact(value: Any) -> bool:
    return _has_all(value, CONTACT_SIGNATURE)


def has_extensions(value: Any) -> bool:
    """Return True if ``value`` carries a non-empty ``extensions`` mapping."""
    fields = defined_fields(value)
    if fields is None:
        return False
    extensions = fields.get("extensions")
    return isinstance(extensions, Mapping) and len(extensions) > 0


def document_id(value: Any) -> str | None:
    """Return the identifier of ``value`` as a string, or None if it has none."""
    fields = defined_fields(value)
    if fields is None or ID_FIELD not in fields:
        return None
    return str(fields[ID_FIELD])


def are_documents_equal(*documents: Any) -> bool:
    """Return True if all given documents share one identifier.

    Identifiers are compared as strings, so an ObjectId and its hex string are
    equal. Fewer than two documents, or any document without an identifier,
    yields False.
    """
    if len(documents) < 2:
        return False
    ids = [document_id(document) for document in documents]
    if any(record_id is None for record_id in ids):
        return False
    return len(set(ids)) == 1
