# =============================================================================
# lib/bigquery_client.py - BigQuery Client Wrapper
# =============================================================================
# This module owns construction of the shared google-cloud-bigquery client.
# It implements the singleton pattern so one client (and its HTTP session)
# is reused across requests.
#
# When the client cannot be constructed (no Application Default Credentials,
# library misconfiguration) the wrapper hands back None instead of raising.
# Callers treat None as "development mode" and serve sample data.
#
# Usage:
#   from lib.bigquery_client import BigQueryClient
#   client = BigQueryClient.get_client()   # bigquery.Client or None
# =============================================================================

from __future__ import annotations

import logging

from google.cloud import bigquery

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class BigQueryClient:
    """
    Lazily-built, process-wide BigQuery client.

    Construction is attempted at most once per process; a failed attempt is
    remembered so every request doesn't retry credential discovery.
    """

    _instance: bigquery.Client | None = None
    _initialized: bool = False

    @classmethod
    def get_client(cls) -> bigquery.Client | None:
        """
        Get or create the singleton BigQuery client.

        Returns:
            bigquery.Client, or None when running in development mode
        """
        if cls._initialized:
            return cls._instance

        cls._initialized = True

        if settings.BIGQUERY_DEV_MODE:
            logger.info("BIGQUERY_DEV_MODE is set, BigQuery client not created")
            return None

        try:
            cls._instance = bigquery.Client(
                project=settings.BIGQUERY_PROJECT_ID,
                location=settings.BIGQUERY_LOCATION,
            )
            logger.info(
                f"BigQuery client initialized for project: {settings.BIGQUERY_PROJECT_ID}"
            )
        except Exception as e:
            # Expected on developer machines without gcloud credentials
            logger.warning(f"BigQuery client initialization failed, using development mode: {e}")
            cls._instance = None

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached client so the next call rebuilds it."""
        if cls._instance is not None:
            cls._instance.close()
        cls._instance = None
        cls._initialized = False
