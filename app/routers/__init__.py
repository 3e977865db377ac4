# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Process liveness endpoint
# - bigquery_api.py: JSON endpoints under /bigquery/api
# - ui.py: Server-rendered console page and its form actions
#
# Each router is mounted in main.py.
# =============================================================================

from . import bigquery_api
from . import health
from . import ui

__all__ = [
    "bigquery_api",
    "health",
    "ui",
]
