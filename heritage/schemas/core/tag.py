"""Tag schema."""

from pydantic import Field

from heritage.schemas.document import Document


class Tag(Document):
    """Keyword attached to digital entities."""

    value: str = Field(..., min_length=1, examples=["bronze", "roman"])
