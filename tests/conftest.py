"""Shared fixtures for the window designer tests."""

from __future__ import annotations
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from joinery.api.dependencies import get_storage
from joinery.api.main import create_app
from joinery.config import Settings
from joinery.core.catalog import TypeCatalog
from joinery.core.engine import DrawingEngine
from joinery.models import WindowDesign
from joinery.services.cost_estimator import CostEstimator
from joinery.services.storage import MemoryStorage


@pytest.fixture
def catalog() -> TypeCatalog:
    return TypeCatalog()


@pytest.fixture
def engine(catalog: TypeCatalog) -> DrawingEngine:
    return DrawingEngine(catalog=catalog)


@pytest.fixture
def estimator(catalog: TypeCatalog) -> CostEstimator:
    return CostEstimator(catalog)


@pytest.fixture
def storage() -> MemoryStorage:
    """Empty store."""
    return MemoryStorage()


@pytest.fixture
def seeded_storage() -> MemoryStorage:
    """Store holding the sample project with a double and a triple window."""
    return MemoryStorage(seed=True)


@pytest.fixture
def double_window() -> WindowDesign:
    return WindowDesign(
        name="Bedroom Window", type="double", width=1800, height=1200,
        openable_casements="both", has_georgian_bars=True,
        georgian_bars_horizontal=2, georgian_bars_vertical=1,
    )


@pytest.fixture
def client(seeded_storage: MemoryStorage) -> Iterator[TestClient]:
    """API client backed by a fresh seeded store for every test."""
    app = create_app(Settings())
    app.dependency_overrides[get_storage] = lambda: seeded_storage
    with TestClient(app) as test_client:
        yield test_client
