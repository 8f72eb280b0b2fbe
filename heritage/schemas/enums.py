"""Enumerations for the heritage data model.

``UserRank`` and ``Collection`` mirror the closed value sets supplied by the
platform; they are consumed here as opaque strings. ``RecordKind`` is the
explicit tag produced by classification.
"""

from enum import Enum


class UserRank(str, Enum):
    """Permission rank of a user account."""

    USER = "user"
    UPLOAD_REQUESTED = "uploadrequested"
    UPLOADER = "uploader"
    ADMIN = "admin"


class Collection(str, Enum):
    """Collections records are stored in."""

    ADDRESS = "address"
    ANNOTATION = "annotation"
    COMPILATION = "compilation"
    CONTACT = "contact"
    DIGITAL_ENTITY = "digitalentity"
    ENTITY = "entity"
    GROUP = "group"
    INSTITUTION = "institution"
    PERSON = "person"
    PHYSICAL_ENTITY = "physicalentity"
    TAG = "tag"


class RecordKind(str, Enum):
    """Explicit variant tag assigned to a classified payload."""

    REFERENCE = "reference"
    ANNOTATION = "annotation"
    COMPILATION = "compilation"
    ENTITY = "entity"
    GROUP = "group"
    DIGITAL_ENTITY = "digital_entity"
    PHYSICAL_ENTITY = "physical_entity"
    PERSON = "person"
    INSTITUTION = "institution"
    ADDRESS = "address"
    CONTACT = "contact"
    TAG = "tag"
    UNKNOWN = "unknown"


# Kinds that exist both as a reference and as a resolved record.
LINKABLE_KINDS = frozenset(
    {
        RecordKind.PERSON,
        RecordKind.INSTITUTION,
        RecordKind.ADDRESS,
        RecordKind.CONTACT,
        RecordKind.TAG,
        RecordKind.DIGITAL_ENTITY,
        RecordKind.PHYSICAL_ENTITY,
    }
)
