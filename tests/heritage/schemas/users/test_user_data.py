"""Tests for user and group schemas."""

import pytest
from pydantic import ValidationError

from heritage.schemas import Collection, Group, StrippedUserData, UserData, UserRank
from tests.utils.payloads import group_payload, stripped_user_payload


def _user_payload() -> dict:
    return {
        "_id": "u1",
        "username": "alovelace",
        "sessionID": "s3cr3t",
        "fullname": "Ada Lovelace",
        "prename": "Ada",
        "surname": "Lovelace",
        "mail": "ada@example.org",
        "role": "uploader",
        "data": {"entity": ["e1", None, "e2"], "compilation": []},
    }


class TestUserData:
    """Test UserData model."""

    def test_user_valid(self) -> None:
        user = UserData.model_validate(_user_payload())

        assert user.role is UserRank.UPLOADER
        assert user.session_id == "s3cr3t"

    def test_strip_drops_private_fields(self) -> None:
        stripped = UserData.model_validate(_user_payload()).strip()

        assert isinstance(stripped, StrippedUserData)
        assert stripped.model_dump(by_alias=True) == stripped_user_payload("u1")

    def test_session_id_hidden_from_repr(self) -> None:
        assert "s3cr3t" not in repr(UserData.model_validate(_user_payload()))

    def test_owned_skips_empty_slots(self) -> None:
        user = UserData.model_validate(_user_payload())

        assert user.owned(Collection.ENTITY) == ["e1", "e2"]
        assert user.owned(Collection.TAG) == []

    def test_unknown_role_rejected(self) -> None:
        payload = _user_payload()
        payload["role"] = "superuser"

        with pytest.raises(ValidationError):
            UserData.model_validate(payload)


class TestGroup:
    """Test Group model."""

    def test_group_valid(self) -> None:
        group = Group.model_validate(group_payload())

        assert group.creator.username == "alovelace"
        assert [member.id for member in group.members] == ["u2"]

    def test_includes_creator_owner_and_member(self) -> None:
        group = Group.model_validate(group_payload())

        assert group.includes("u1")
        assert group.includes("u2")
        assert not group.includes("u3")

    def test_group_requires_members(self) -> None:
        payload = group_payload()
        del payload["members"]

        with pytest.raises(ValidationError):
            Group.model_validate(payload)
