# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the service layer and its schemas:
# - models/: Pydantic response schemas for the REST API
# - services/: BigQueryService, one method per gateway operation
#
# Code in this package should NOT import FastAPI routing or templates.
# It raises app.exceptions errors and leaves HTTP translation to the app.
# =============================================================================
