# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a mocked BigQuery client and services built on it
# - Provides a TestClient factory that injects a given service
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("BIGQUERY_PROJECT_ID", "test-project")
os.environ.setdefault("BIGQUERY_DATASET_ID", "test_dataset")
# Never attempt credential discovery during tests
os.environ["BIGQUERY_DEV_MODE"] = "true"
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from google.cloud import bigquery

from app.dependencies import get_bigquery_service
from app.main import app
from core.services.bigquery_service import BigQueryService
from lib.bigquery_client import BigQueryClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_bigquery_singletons():
    """Keep cached client/service state from leaking between tests."""
    BigQueryClient.reset()
    get_bigquery_service.cache_clear()
    yield
    BigQueryClient.reset()
    get_bigquery_service.cache_clear()
    app.dependency_overrides.clear()


@pytest.fixture
def mock_bq_client():
    """A MagicMock standing in for google.cloud.bigquery.Client."""
    return MagicMock(spec=bigquery.Client)


@pytest.fixture
def live_service(mock_bq_client):
    """Service wired to the mocked client (live mode)."""
    return BigQueryService(
        project_id="test-project",
        dataset_id="test_dataset",
        client=mock_bq_client,
        query_timeout=30.0,
    )


@pytest.fixture
def dev_service():
    """Service without a client (development mode)."""
    return BigQueryService(project_id="test-project", dataset_id="test_dataset")


@pytest.fixture
def make_client():
    """
    Build a TestClient whose requests use the given service.

    Usage:
        client = make_client(live_service)
    """
    def _make(service, raise_server_exceptions: bool = True) -> TestClient:
        app.dependency_overrides[get_bigquery_service] = lambda: service
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def sample_rows():
    """Rows in the shape of the sample schema."""
    return [
        {"id": 1, "name": "Alice", "email": "alice@example.com", "created_at": "2024-01-15T10:00:00Z"},
        {"id": 2, "name": "Bob", "email": None, "created_at": "2024-01-16T10:00:00Z"},
    ]
