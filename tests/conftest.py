"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from meilirest.config import MeiliSearchSettings

# ============================================================================
# Test Data Constants
# ============================================================================


HOST = "http://localhost:7700"
MASTER_KEY = "test-master-key"


# ============================================================================
# Sample Response Fixtures
# ============================================================================


@pytest.fixture
def key_response() -> dict[str, Any]:
    """Minimal /keys response."""
    return {"key": "abc123"}


@pytest.fixture
def health_response() -> dict[str, Any]:
    """Sample /health response."""
    return {"status": "available"}


@pytest.fixture
def version_response() -> dict[str, Any]:
    """Sample /version response."""
    return {
        "commitSha": "b46889b5f0f2f8b91438a08a358ba8f05fc09fc1",
        "commitDate": "2021-07-08T13:21:38Z",
        "pkgVersion": "0.21.0",
    }


@pytest.fixture
def dump_response() -> dict[str, Any]:
    """Sample dump creation response."""
    return {"uid": "20200929-114144097", "status": "in_progress"}


@pytest.fixture
def index_response() -> dict[str, Any]:
    """Sample index metadata."""
    return {
        "uid": "movies",
        "name": "movies",
        "primaryKey": "id",
        "createdAt": "2021-07-08T13:21:38.000Z",
        "updatedAt": "2021-07-08T13:21:38.000Z",
    }


@pytest.fixture
def index_stats_response() -> dict[str, Any]:
    """Sample /indexes/{uid}/stats response."""
    return {
        "numberOfDocuments": 19654,
        "isIndexing": False,
        "fieldsDistribution": {"id": 19654, "title": 19654, "overview": 19654},
    }


@pytest.fixture
def all_stats_response(index_stats_response: dict[str, Any]) -> dict[str, Any]:
    """Sample /stats response."""
    return {
        "databaseSize": 447819776,
        "lastUpdate": "2021-07-08T13:21:38.000Z",
        "indexes": {"movies": index_stats_response},
    }


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> MeiliSearchSettings:
    """Create mock settings for testing."""
    return MeiliSearchSettings(
        host=HOST,
        api_key=MASTER_KEY,
        timeout=5.0,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> MeiliSearchSettings:
    """Create settings without an API key."""
    return MeiliSearchSettings(host=HOST, api_key=None)
