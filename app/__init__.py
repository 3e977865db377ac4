# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: BigQueryService dependency
# - routers/: REST, UI and health endpoints
# - templates/: Jinja2 templates for the console page
#
# The app layer is thin - it handles HTTP concerns and delegates
# BigQuery calls to the core/ package.
# =============================================================================

__version__ = "1.0.0"
