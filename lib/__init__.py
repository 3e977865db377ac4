# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - bigquery_client.py: Shared BigQuery client with development-mode fallback
# =============================================================================

from lib.bigquery_client import BigQueryClient

__all__ = [
    "BigQueryClient",
]
