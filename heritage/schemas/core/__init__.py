"""Linkable core record schemas.

- Address: Postal addresses
- Contact: Contact references
- Tag: Keywords
- Institution: Museums, archives, universities
- Person: Individual people
"""

from heritage.schemas.core.address import Address
from heritage.schemas.core.contact import Contact
from heritage.schemas.core.institution import Institution
from heritage.schemas.core.person import Person
from heritage.schemas.core.tag import Tag

__all__ = ["Address", "Contact", "Institution", "Person", "Tag"]
