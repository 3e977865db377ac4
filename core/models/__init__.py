# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for the REST API:
# - warehouse.py: Query, table and health response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .warehouse import (
    DataInsertResponse,
    ErrorResponse,
    GatewayResponse,
    QueryResponse,
    TableCreateResponse,
    TableDeleteResponse,
    TableListResponse,
    WarehouseHealthResponse,
)

__all__ = [
    "DataInsertResponse",
    "ErrorResponse",
    "GatewayResponse",
    "QueryResponse",
    "TableCreateResponse",
    "TableDeleteResponse",
    "TableListResponse",
    "WarehouseHealthResponse",
]
