"""
Shared pytest fixtures and configuration for all tests.
"""

from typing import Any

import pytest

from academia.events import BroadcastChannel
from academia.graphql.context import build_context
from academia.graphql.schema import schema
from academia.store import EntityStore, Gender, ProfessorRecord


@pytest.fixture
def store() -> EntityStore:
    """A fresh, empty entity store."""
    return EntityStore()


@pytest.fixture
def channel() -> BroadcastChannel:
    return BroadcastChannel()


@pytest.fixture
def context(store: EntityStore, channel: BroadcastChannel) -> dict[str, Any]:
    return build_context(store, channel)


@pytest.fixture
def execute(context: dict[str, Any]):
    """Run a GraphQL operation against the fixture store."""

    async def _execute(query: str, **variables: Any):
        return await schema.execute(query, variable_values=variables, context_value=context)

    return _execute


@pytest.fixture
def professor(store: EntityStore) -> ProfessorRecord:
    """A professor already present in the store."""
    return store.professors.insert(
        ProfessorRecord(
            name="Dr. A",
            email="dr.a@example.edu",
            gender=Gender.FEMALE,
            specialization="Databases",
        )
    )


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
