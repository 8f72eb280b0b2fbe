"""Shared data model for a cultural-heritage digitization platform.

Records (digital and physical objects, persons, institutions, annotations,
compilations, users and groups) arrive either resolved or as bare references.
This package models both states, recognises which one an untyped payload is,
and expands references up to a bounded depth.
"""

from heritage.schemas import (
    Annotation,
    Compilation,
    DigitalEntity,
    Document,
    Entity,
    Institution,
    Person,
    PhysicalEntity,
    RecordKind,
    Reference,
    Vector3,
    as_vector3,
)
from heritage.typeguards.classifier import Classification, ClassificationError, classify, parse_record
from heritage.resolution import MAX_RESOLUTION_DEPTH, ResolutionError, Resolver

__version__ = "0.1.0"

__all__ = [
    "MAX_RESOLUTION_DEPTH",
    "Annotation",
    "Classification",
    "ClassificationError",
    "Compilation",
    "DigitalEntity",
    "Document",
    "Entity",
    "Institution",
    "Person",
    "PhysicalEntity",
    "RecordKind",
    "Reference",
    "ResolutionError",
    "Resolver",
    "Vector3",
    "as_vector3",
    "classify",
    "parse_record",
]
