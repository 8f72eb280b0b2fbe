"""Metadata entity schemas.

- BaseEntity: Fields shared by digital and physical entities
- DigitalEntity: Digital objects and their provenance
- PhysicalEntity: Physical objects and their location
"""

from heritage.schemas.metadata.base_entity import BaseEntity
from heritage.schemas.metadata.digital_entity import DigitalEntity
from heritage.schemas.metadata.physical_entity import PhysicalEntity

__all__ = ["BaseEntity", "DigitalEntity", "PhysicalEntity"]
