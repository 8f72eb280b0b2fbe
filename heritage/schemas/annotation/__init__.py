"""Annotation schemas."""

from heritage.schemas.annotation.annotation import (
    Agent,
    Annotation,
    Body,
    CameraPerspective,
    Content,
    Selector,
    Source,
    Target,
)

__all__ = [
    "Agent",
    "Annotation",
    "Body",
    "CameraPerspective",
    "Content",
    "Selector",
    "Source",
    "Target",
]
