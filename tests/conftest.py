"""Shared fixtures for the metro router tests."""

from __future__ import annotations

import pytest

from metro_router.adapters.graph import CSVGraphRepository
from metro_router.config import GraphConfig, reset_config
from metro_router.container import reset_container
from metro_router.graph.store import GraphStore
from metro_router.services import MetroRouterService

from .helpers import InMemoryRepository


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def metro() -> GraphStore:
    """The packaged reference network."""
    return CSVGraphRepository(GraphConfig()).load()


@pytest.fixture
def service(metro: GraphStore) -> MetroRouterService:
    return MetroRouterService(graph_repository=InMemoryRepository(metro))
