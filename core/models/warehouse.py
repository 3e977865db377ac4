# =============================================================================
# core/models/warehouse.py - REST Response Schemas
# =============================================================================
# These models define the JSON contract of the /bigquery/api endpoints.
# Every response carries "success"; counts use camelCase keys (rowCount,
# tableCount) on the wire, snake_case in Python.
# =============================================================================

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class GatewayResponse(BaseModel):
    """Base for all REST responses."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True


class QueryResponse(GatewayResponse):
    """
    Result of an ad-hoc query.

    Example:
        {
            "success": true,
            "rowCount": 1,
            "data": [{"id": 1, "name": "Alice"}]
        }
    """

    row_count: int = Field(..., alias="rowCount", ge=0)
    data: list[dict[str, Any]] = Field(default_factory=list)


class TableListResponse(GatewayResponse):
    """Tables in the configured dataset."""

    table_count: int = Field(..., alias="tableCount", ge=0)
    tables: list[str] = Field(default_factory=list)


class TableCreateResponse(GatewayResponse):
    message: str
    # False when the table already existed
    created: bool = True


class DataInsertResponse(GatewayResponse):
    message: str
    row_count: int = Field(..., alias="rowCount", ge=0)


class TableDeleteResponse(GatewayResponse):
    message: str
    # False when the table did not exist
    deleted: bool = True


class WarehouseHealthResponse(GatewayResponse):
    status: str = "BigQuery connection is healthy"
    mode: Literal["live", "development"]


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers (documentation only)."""

    success: bool = False
    error: str
    code: str
    suggestion: str | None = None
    details: dict[str, Any] | None = None
