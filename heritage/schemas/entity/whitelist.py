"""Whitelist-based access list for entities and compilations."""

from pydantic import BaseModel, ConfigDict, Field

from heritage.schemas.users.group import Group
from heritage.schemas.users.user_data import StrippedUserData


class Whitelist(BaseModel):
    """Access list: when enabled, only listed persons and group members may access the record."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    enabled: bool = Field(False)
    persons: list[StrippedUserData] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)

    def allows(self, user_id: str) -> bool:
        """Return True if ``user_id`` may access the record guarded by this list."""
        if not self.enabled:
            return True
        if any(person.id == user_id for person in self.persons):
            return True
        return any(group.includes(user_id) for group in self.groups)
