"""Explicit classification of untagged payloads.

``classify`` runs the structural predicates once, in dependency order, and
returns a ``RecordKind`` tag so downstream code branches on the tag instead of
re-checking signatures.
"""

import logging
from collections.abc import Callable
from typing import Any, NamedTuple

from pydantic import ValidationError

from heritage.schemas.document import Document
from heritage.schemas.enums import RecordKind
from heritage.schemas.registry import model_for
from heritage.typeguards.predicates import (
    is_address,
    is_annotation,
    is_compilation,
    is_contact,
    is_digital_entity,
    is_entity,
    is_group,
    is_institution,
    is_person,
    is_physical_entity,
    is_tag,
    is_unresolved,
)

logger = logging.getLogger(__name__)


class ClassificationError(Exception):
    """Raised when a payload cannot be turned into a typed record."""

    def __init__(self, message: str, kind: RecordKind = RecordKind.UNKNOWN) -> None:
        super().__init__(message)
        self.kind = kind


class Classification(NamedTuple):
    """A payload together with the variant tag assigned to it."""

    kind: RecordKind
    payload: Any

    @property
    def is_known(self) -> bool:
        return self.kind is not RecordKind.UNKNOWN


# Narrower signatures come before broader ones: the digital and physical
# checks include the metadata-entity check, and a person also has a name.
CLASSIFICATION_ORDER: tuple[tuple[RecordKind, Callable[[Any], bool]], ...] = (
    (RecordKind.REFERENCE, is_unresolved),
    (RecordKind.ANNOTATION, is_annotation),
    (RecordKind.ENTITY, is_entity),
    (RecordKind.COMPILATION, is_compilation),
    (RecordKind.GROUP, is_group),
    (RecordKind.DIGITAL_ENTITY, is_digital_entity),
    (RecordKind.PHYSICAL_ENTITY, is_physical_entity),
    (RecordKind.PERSON, is_person),
    (RecordKind.INSTITUTION, is_institution),
    (RecordKind.ADDRESS, is_address),
    (RecordKind.CONTACT, is_contact),
    (RecordKind.TAG, is_tag),
)


def classify(payload: Any) -> Classification:
    """Tag ``payload`` with the first variant whose signature it carries.

    Never raises; a payload matching no signature is tagged ``UNKNOWN``.

    Examples:
        >>> classify({"_id": "abc"}).kind
        <RecordKind.REFERENCE: 'reference'>
    """
    for kind, predicate in CLASSIFICATION_ORDER:
        if predicate(payload):
            return Classification(kind, payload)

    logger.debug(f"Payload of type {type(payload).__name__} matched no record signature")
    return Classification(RecordKind.UNKNOWN, payload)


def parse_record(payload: Any, expected: RecordKind | None = None) -> Document:
    """Classify ``payload`` and validate it into the matching model.

    Args:
        payload: Untyped record, e.g. a decoded JSON object.
        expected: If given, the payload must classify as this kind.

    Returns:
        Document: The validated record (a ``Reference`` for bare identifiers).

    Raises:
        ClassificationError: If the payload matches no variant, matches a
            different variant than ``expected``, or fails validation.
    """
    kind, _ = classify(payload)

    if kind is RecordKind.UNKNOWN:
        raise ClassificationError("Payload matches no known record signature")

    if expected is not None and kind is not expected:
        raise ClassificationError(
            f"Expected {expected.value} record but payload classifies as {kind.value}",
            kind=kind,
        )

    try:
        return model_for(kind).model_validate(payload)
    except ValidationError as e:
        raise ClassificationError(
            f"Payload classified as {kind.value} failed validation: {e}",
            kind=kind,
        ) from e
