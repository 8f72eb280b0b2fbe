"""Entity and compilation schemas.

- Entity: Uploaded object with files, settings and annotations
- Compilation: Curated collection of entities
- Whitelist: Access list shared by both
- EntitySettings: Viewer presentation settings
"""

from heritage.schemas.entity.compilation import Compilation
from heritage.schemas.entity.entity import DataSource, Entity, ProcessedFiles
from heritage.schemas.entity.settings import (
    Background,
    CameraPositionInitial,
    Color,
    EntityLight,
    EntitySettings,
    Position,
)
from heritage.schemas.entity.whitelist import Whitelist

__all__ = [
    "Background",
    "CameraPositionInitial",
    "Color",
    "Compilation",
    "DataSource",
    "Entity",
    "EntityLight",
    "EntitySettings",
    "Position",
    "ProcessedFiles",
    "Whitelist",
]
