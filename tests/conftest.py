"""
Shared pytest fixtures and configuration for all tests.
"""

import itertools
import os
from collections.abc import Generator
from typing import Any

import pytest

from hotspots.gate import MutationGate
from hotspots.store import InMemoryDocumentStore, StoreClients

FIXED_TIMESTAMP = "2024-05-01T12:00:00.000Z"


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def seeded_store() -> InMemoryDocumentStore:
    """Store holding one user, one movie with two hotspots, and a second bare movie."""
    return InMemoryDocumentStore(
        {
            "users": {
                "editor-1": {
                    "uid": "editor-1",
                    "displayName": "Ada",
                    "email": "ada@example.com",
                    "editedMovies": {"-Nx0000000000000000a": "movie-1"},
                }
            },
            "movies": {
                "movie-1": {
                    "id": "movie-1",
                    "title": "Intro",
                    "editorId": "editor-1",
                    "createdAt": "2024-01-01T00:00:00.000Z",
                    "hotspots": {
                        "hs-1": {"id": "hs-1", "title": "Door", "startTime": 1.5, "endTime": 3},
                        "hs-2": {"id": "hs-2", "title": "Window", "x": 0.25, "y": 0.75},
                    },
                },
                "movie-2": {"id": "movie-2", "title": "Bare"},
            },
        }
    )


@pytest.fixture
def id_factory():
    """Deterministic identifier generator: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def gate(store: InMemoryDocumentStore, id_factory) -> MutationGate:
    return MutationGate(store, id_factory=id_factory, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def seeded_gate(seeded_store: InMemoryDocumentStore, id_factory) -> MutationGate:
    return MutationGate(seeded_store, id_factory=id_factory, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def seeded_clients(seeded_store: InMemoryDocumentStore) -> StoreClients:
    return StoreClients(reader=seeded_store, store=seeded_store)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
