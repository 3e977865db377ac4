# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .bigquery_service import SAMPLE_SCHEMA, BigQueryService

__all__ = [
    "BigQueryService",
    "SAMPLE_SCHEMA",
]
