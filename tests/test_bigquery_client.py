# =============================================================================
# tests/test_bigquery_client.py - BigQuery Client Construction Tests
# =============================================================================
# Tests for the shared client wrapper and the service dependency:
# - Successful construction is cached
# - Construction failure falls back to development mode (None)
# - BIGQUERY_DEV_MODE skips construction entirely
# =============================================================================

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from google.auth.exceptions import DefaultCredentialsError
from starlette.concurrency import run_in_threadpool

from app.config import settings
from app.dependencies import get_bigquery_service
from app.main import app
from lib.bigquery_client import BigQueryClient


class TestBigQueryClient:
    """Tests for BigQueryClient.get_client."""

    def test_dev_mode_skips_construction(self):
        with patch.object(settings, "BIGQUERY_DEV_MODE", True), \
                patch("lib.bigquery_client.bigquery.Client") as client_cls:
            assert BigQueryClient.get_client() is None

        client_cls.assert_not_called()

    def test_builds_client_for_configured_project(self):
        instance = MagicMock()
        with patch.object(settings, "BIGQUERY_DEV_MODE", False), \
                patch.object(settings, "BIGQUERY_LOCATION", "EU"), \
                patch("lib.bigquery_client.bigquery.Client", return_value=instance) as client_cls:
            assert BigQueryClient.get_client() is instance

        client_cls.assert_called_once_with(project="test-project", location="EU")

    def test_client_is_cached(self):
        with patch.object(settings, "BIGQUERY_DEV_MODE", False), \
                patch("lib.bigquery_client.bigquery.Client") as client_cls:
            first = BigQueryClient.get_client()
            second = BigQueryClient.get_client()

        assert first is second
        assert client_cls.call_count == 1

    def test_missing_credentials_fall_back_to_none(self):
        with patch.object(settings, "BIGQUERY_DEV_MODE", False), \
                patch(
                    "lib.bigquery_client.bigquery.Client",
                    side_effect=DefaultCredentialsError("Could not automatically determine credentials"),
                ) as client_cls:
            assert BigQueryClient.get_client() is None
            # The failure is remembered
            assert BigQueryClient.get_client() is None

        assert client_cls.call_count == 1

    def test_reset_closes_client(self):
        instance = MagicMock()
        with patch.object(settings, "BIGQUERY_DEV_MODE", False), \
                patch("lib.bigquery_client.bigquery.Client", return_value=instance):
            BigQueryClient.get_client()

        BigQueryClient.reset()

        instance.close.assert_called_once()
        assert BigQueryClient._instance is None


class TestServiceDependency:
    """Tests for get_bigquery_service."""

    def test_development_mode_when_no_client(self):
        service = get_bigquery_service()

        assert service.is_development_mode is True
        assert service.project_id == "test-project"
        assert service.dataset_id == "test_dataset"
        assert service.query_timeout == settings.BIGQUERY_QUERY_TIMEOUT

    def test_live_mode_uses_shared_client(self):
        instance = MagicMock()
        with patch.object(settings, "BIGQUERY_DEV_MODE", False), \
                patch("lib.bigquery_client.bigquery.Client", return_value=instance):
            service = get_bigquery_service()

        assert service.client is instance
        assert service.is_development_mode is False

    def test_service_is_cached(self):
        assert get_bigquery_service() is get_bigquery_service()

    def test_startup_builds_service_off_the_event_loop(self):
        with patch("app.main.run_in_threadpool", wraps=run_in_threadpool) as threadpool, \
                patch("lib.bigquery_client.bigquery.Client") as client_cls:
            with TestClient(app) as client:
                assert client.get("/health").status_code == 200

        threadpool.assert_called_once_with(get_bigquery_service)
        # BIGQUERY_DEV_MODE is set for the test run
        client_cls.assert_not_called()
        assert get_bigquery_service.cache_info().currsize == 1
