"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from factories import PROPERTY_ID, InMemoryDiscountStore, InMemoryRuleStore


@pytest.fixture
def property_id() -> str:
    return str(PROPERTY_ID.value)


@pytest.fixture
def rule_store() -> InMemoryRuleStore:
    return InMemoryRuleStore()


@pytest.fixture
def discount_store() -> InMemoryDiscountStore:
    return InMemoryDiscountStore()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)
