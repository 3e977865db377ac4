# =============================================================================
# app/dependencies.py - FastAPI Service Dependencies
# =============================================================================
# Provides dependency injection for the BigQuery service.
#
# Usage:
#   from app.dependencies import get_bigquery_service
#
#   @router.get("/tables")
#   async def tables(service: BigQueryService = Depends(get_bigquery_service)):
#       return service.list_tables()
#
# Tests swap the service via app.dependency_overrides[get_bigquery_service].
# =============================================================================

from functools import lru_cache

from app.config import settings
from core.services.bigquery_service import BigQueryService
from lib.bigquery_client import BigQueryClient


@lru_cache
def get_bigquery_service() -> BigQueryService:
    """
    Get the process-wide BigQueryService.

    Falls back to development mode when no client could be created.
    """
    return BigQueryService(
        project_id=settings.BIGQUERY_PROJECT_ID,
        dataset_id=settings.BIGQUERY_DATASET_ID,
        client=BigQueryClient.get_client(),
        query_timeout=settings.BIGQUERY_QUERY_TIMEOUT,
    )
