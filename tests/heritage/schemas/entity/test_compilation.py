"""Tests for the Compilation schema and whitelist access lists."""

import pytest
from pydantic import ValidationError

from heritage.schemas import Compilation, Entity, Reference, Whitelist
from tests.utils.payloads import (
    compilation_payload,
    entity_payload,
    group_payload,
    stripped_user_payload,
)


class TestCompilation:
    """Test suite for Compilation."""

    def test_compilation_with_references(self) -> None:
        compilation = Compilation.model_validate(compilation_payload())

        assert isinstance(compilation.entities["e1"], Reference)
        assert compilation.is_protected is False

    def test_compilation_with_resolved_entity(self) -> None:
        compilation = Compilation.model_validate(
            compilation_payload(entities={"e1": entity_payload("e1")})
        )

        assert isinstance(compilation.entities["e1"], Entity)

    def test_password_protection(self) -> None:
        assert Compilation.model_validate(compilation_payload(password="hunter2")).is_protected
        assert Compilation.model_validate(compilation_payload(password=True)).is_protected
        assert not Compilation.model_validate(compilation_payload(password="")).is_protected

    def test_compilation_requires_entities(self) -> None:
        payload = compilation_payload()
        del payload["entities"]

        with pytest.raises(ValidationError):
            Compilation.model_validate(payload)


class TestWhitelist:
    """Test Whitelist access checks."""

    def test_disabled_whitelist_allows_everyone(self) -> None:
        assert Whitelist().allows("anyone")

    def test_enabled_whitelist_allows_listed_person(self) -> None:
        whitelist = Whitelist.model_validate(
            {"enabled": True, "persons": [stripped_user_payload("u5", "guest")], "groups": []}
        )

        assert whitelist.allows("u5")
        assert not whitelist.allows("u6")

    def test_enabled_whitelist_allows_group_members(self) -> None:
        whitelist = Whitelist.model_validate(
            {"enabled": True, "persons": [], "groups": [group_payload()]}
        )

        assert whitelist.allows("u2")
        assert not whitelist.allows("u9")
