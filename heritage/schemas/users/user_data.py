"""User account schemas.

``UserData`` holds the session identifier and must never be shown in public;
``StrippedUserData`` is the public projection.
"""

from typing import Any

from pydantic import Field

from heritage.schemas.document import Document
from heritage.schemas.enums import Collection, UserRank


class StrippedUserData(Document):
    """User reduced to identifier, full name and username. Safe to display."""

    fullname: str = Field(..., examples=["Ada Lovelace"])
    username: str = Field(..., min_length=1, examples=["alovelace"])


class UserData(Document):
    """Full user account as stored.

    Examples:
        >>> user = UserData.model_validate(
        ...     {
        ...         "_id": "u1",
        ...         "username": "alovelace",
        ...         "sessionID": "s3cr3t",
        ...         "fullname": "Ada Lovelace",
        ...         "prename": "Ada",
        ...         "surname": "Lovelace",
        ...         "mail": "ada@example.org",
        ...         "role": "uploader",
        ...         "data": {"entity": ["e1"]},
        ...     }
        ... )
        >>> user.strip().model_dump(by_alias=True)
        {'_id': 'u1', 'fullname': 'Ada Lovelace', 'username': 'alovelace'}
    """

    username: str = Field(..., min_length=1)
    session_id: str = Field("", alias="sessionID", repr=False)
    fullname: str = Field(...)
    prename: str = Field("")
    surname: str = Field("")
    mail: str = Field("")

    role: UserRank = Field(UserRank.USER)

    data: dict[Collection, list[Any]] = Field(
        default_factory=dict,
        description="Identifiers of owned records per collection",
    )

    def strip(self) -> StrippedUserData:
        """Return the public projection of this user."""
        return StrippedUserData(id=self.id, fullname=self.fullname, username=self.username)

    def owned(self, collection: Collection) -> list[str]:
        """Return the identifiers this user owns in ``collection``, skipping empty slots."""
        return [str(item) for item in self.data.get(collection, []) if item is not None]
