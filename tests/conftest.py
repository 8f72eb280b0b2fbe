"""Shared pytest fixtures for the heritage test suite.

Provides test configuration, an in-memory record store standing in for the
storage layer, and correlation ID cleanup.
"""

import os
from collections.abc import Mapping
from typing import Any

import pytest

from heritage.common.config import HeritageConfig, get_config
from heritage.common.tracing import clear_correlation_id
from heritage.schemas import RecordKind
from tests.utils.payloads import (
    address_payload,
    contact_payload,
    digital_entity_payload,
    institution_payload,
    person_payload,
    physical_entity_payload,
    tag_payload,
)

# ========== Test Environment Setup ==========


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Pin configuration env vars so local .env files cannot change test outcomes."""
    os.environ["HERITAGE_RESOLUTION_DEPTH"] = "1"
    os.environ["HERITAGE_LOG_LEVEL"] = "INFO"
    os.environ["HERITAGE_LOG_JSON"] = "true"
    get_config.cache_clear()

    yield

    get_config.cache_clear()


@pytest.fixture(autouse=True)
def reset_correlation_id():
    """Ensure no correlation ID leaks between tests."""
    clear_correlation_id()
    yield
    clear_correlation_id()


# ========== Configuration Fixtures ==========


@pytest.fixture
def test_config() -> HeritageConfig:
    """Provide a configuration instance for testing."""
    return HeritageConfig(resolution_depth=2, log_level="DEBUG", log_json=True)


# ========== Storage Fixtures ==========


class InMemoryStore:
    """Record store keyed by (kind, identifier) that records every lookup."""

    def __init__(self) -> None:
        self.records: dict[tuple[RecordKind, str], dict[str, Any]] = {}
        self.calls: list[tuple[RecordKind, str]] = []

    def add(self, kind: RecordKind, payload: dict[str, Any]) -> None:
        self.records[(kind, payload["_id"])] = payload

    def find(self, kind: RecordKind, record_id: str) -> Mapping[str, Any] | None:
        self.calls.append((kind, record_id))
        return self.records.get((kind, record_id))


@pytest.fixture
def store() -> InMemoryStore:
    """Provide a store holding one fully linked record graph.

    d1 links p1, i1, t1 and ph1; p1 links i1 and c1; i1 links a1; ph1 links a1.
    """
    memory = InMemoryStore()
    memory.add(RecordKind.ADDRESS, address_payload("a1"))
    memory.add(RecordKind.CONTACT, contact_payload("c1"))
    memory.add(RecordKind.TAG, tag_payload("t1"))
    memory.add(RecordKind.INSTITUTION, institution_payload("i1"))
    memory.add(RecordKind.PERSON, person_payload("p1"))
    memory.add(RecordKind.PHYSICAL_ENTITY, physical_entity_payload("ph1"))
    memory.add(RecordKind.DIGITAL_ENTITY, digital_entity_payload("d1"))
    return memory
