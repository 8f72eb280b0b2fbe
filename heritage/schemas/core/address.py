"""Address schema.

Postal address referenced by institutions and places.
"""

from pydantic import Field

from heritage.schemas.document import Document


class Address(Document):
    """Postal address.

    Examples:
        >>> address = Address.model_validate(
        ...     {
        ...         "_id": "a1",
        ...         "building": "Hauptgebäude",
        ...         "number": "1",
        ...         "street": "Albertus-Magnus-Platz",
        ...         "postcode": "50923",
        ...         "city": "Köln",
        ...         "country": "Germany",
        ...     }
        ... )
        >>> address.city
        'Köln'
    """

    building: str = Field("", description="Building name")
    number: str = Field("", description="House number")
    street: str = Field(..., description="Street name")
    postcode: str = Field(..., description="Postal code")
    city: str = Field(..., description="City")
    country: str = Field(..., description="Country")

    # Internal, only used to sort addresses
    creation_date: int = Field(0, ge=0, description="Creation timestamp in milliseconds")
