"""Contact reference schema."""

from pydantic import Field

from heritage.schemas.document import Document


class Contact(Document):
    """Contact details a person left for one metadata entity."""

    mail: str = Field(..., description="Mail address", examples=["ada@example.org"])
    phonenumber: str = Field(..., description="Phone number", examples=["+49 221 000000"])
    note: str = Field("", description="Free-form note")

    # Internal, only used to sort contact references
    creation_date: int = Field(0, ge=0, description="Creation timestamp in milliseconds")
