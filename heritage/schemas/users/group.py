"""Group schema."""

from pydantic import Field

from heritage.schemas.document import Document
from heritage.schemas.users.user_data import StrippedUserData


class Group(Document):
    """Named set of users. Only contains stripped user data, so it may be shown in public."""

    name: str = Field(..., min_length=1, examples=["Excavation team"])
    creator: StrippedUserData = Field(...)
    owners: list[StrippedUserData] = Field(...)
    members: list[StrippedUserData] = Field(...)

    def includes(self, user_id: str) -> bool:
        """Return True if ``user_id`` is the creator, an owner or a member."""
        users = [self.creator, *self.owners, *self.members]
        return any(user.id == user_id for user in users)
