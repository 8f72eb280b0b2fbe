"""Runtime type discrimination for untagged payloads.

The predicates are importable from here. The tagged classifier lives in
``heritage.typeguards.classifier`` because it depends on the schemas, which in
turn depend on these predicates.
"""

from heritage.typeguards.predicates import (
    are_documents_equal,
    document_id,
    has_extensions,
    is_address,
    is_annotation,
    is_compilation,
    is_contact,
    is_digital_entity,
    is_entity,
    is_group,
    is_institution,
    is_metadata_entity,
    is_person,
    is_physical_entity,
    is_resolved_entity,
    is_tag,
    is_unresolved,
)

__all__ = [
    "are_documents_equal",
    "document_id",
    "has_extensions",
    "is_address",
    "is_annotation",
    "is_compilation",
    "is_contact",
    "is_digital_entity",
    "is_entity",
    "is_group",
    "is_institution",
    "is_metadata_entity",
    "is_person",
    "is_physical_entity",
    "is_resolved_entity",
    "is_tag",
    "is_unresolved",
]
