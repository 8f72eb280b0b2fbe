"""User and group schemas."""

from heritage.schemas.users.group import Group
from heritage.schemas.users.user_data import StrippedUserData, UserData

__all__ = ["Group", "StrippedUserData", "UserData"]
