# =============================================================================
# app/routers/bigquery_api.py - BigQuery REST Endpoints
# =============================================================================
# JSON endpoints under /bigquery/api. Each route logs the request and
# delegates to BigQueryService; failures surface as GatewayException and are
# turned into {"success": false, ...} bodies by the handlers in main.py.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query

from app.dependencies import get_bigquery_service
from app.exceptions import GatewayException, HealthCheckError
from core.models import (
    DataInsertResponse,
    ErrorResponse,
    QueryResponse,
    TableCreateResponse,
    TableDeleteResponse,
    TableListResponse,
    WarehouseHealthResponse,
)
from core.services.bigquery_service import SAMPLE_SCHEMA, BigQueryService

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or blank parameter"},
    500: {"model": ErrorResponse, "description": "BigQuery call failed"},
}

TableName = Annotated[str, Path(description="Table name within the configured dataset")]


# =============================================================================
# Queries
# =============================================================================

@router.get("/query", response_model=QueryResponse, responses=ERROR_RESPONSES)
def run_query(
    sql: Annotated[str, Query(description="Standard SQL to execute")],
    service: BigQueryService = Depends(get_bigquery_service),
):
    """
    Run an ad-hoc SQL query.

    Unqualified table names resolve against the configured dataset.
    """
    logger.info(f"Query request received: {sql}")
    rows = service.run_query(sql)

    return QueryResponse(row_count=len(rows), data=rows)


# =============================================================================
# Tables
# =============================================================================

@router.get("/tables", response_model=TableListResponse, responses=ERROR_RESPONSES)
def list_tables(
    service: BigQueryService = Depends(get_bigquery_service),
):
    """List tables in the configured dataset."""
    logger.info("Table list request received")
    tables = service.list_tables()

    return TableListResponse(table_count=len(tables), tables=tables)


@router.post(
    "/table/{table_name}",
    response_model=TableCreateResponse,
    responses=ERROR_RESPONSES,
)
def create_sample_table(
    table_name: TableName,
    service: BigQueryService = Depends(get_bigquery_service),
):
    """
    Create a table with the sample schema.

    Schema: id INT64, name STRING, email STRING, created_at TIMESTAMP.
    Creating a table that already exists succeeds with created=false.
    """
    logger.info(f"Sample table create request received: {table_name}")
    created = service.create_table(table_name, SAMPLE_SCHEMA)

    return TableCreateResponse(
        message=f"Table created successfully: {table_name}",
        created=created,
    )


@router.post(
    "/table/{table_name}/data",
    response_model=DataInsertResponse,
    responses=ERROR_RESPONSES,
)
def insert_data(
    table_name: TableName,
    rows: Annotated[
        list[dict[str, Any]],
        Body(description="Rows to insert, one JSON object per row"),
    ],
    service: BigQueryService = Depends(get_bigquery_service),
):
    """Stream rows into a table."""
    logger.info(f"Data insert request received: {len(rows)} rows into {table_name}")
    inserted = service.insert_data(table_name, rows)

    return DataInsertResponse(
        message=f"{inserted} rows inserted successfully",
        row_count=inserted,
    )


@router.delete(
    "/table/{table_name}",
    response_model=TableDeleteResponse,
    responses=ERROR_RESPONSES,
)
def delete_table(
    table_name: TableName,
    service: BigQueryService = Depends(get_bigquery_service),
):
    """
    Delete a table.

    Deleting a table that does not exist succeeds with deleted=false.
    """
    logger.info(f"Table delete request received: {table_name}")
    deleted = service.delete_table(table_name)

    return TableDeleteResponse(
        message=f"Table deleted successfully: {table_name}",
        deleted=deleted,
    )


# =============================================================================
# Health
# =============================================================================

@router.get(
    "/health",
    response_model=WarehouseHealthResponse,
    responses={500: {"description": "BigQuery connection failed"}},
)
def health_check(
    service: BigQueryService = Depends(get_bigquery_service),
):
    """
    Check BigQuery connectivity.

    Runs SELECT 1 against the warehouse (sample data in development mode).
    """
    logger.info("BigQuery health check request received")
    try:
        service.check_health()
    except GatewayException as e:
        raise HealthCheckError(e.message) from e

    return WarehouseHealthResponse(
        mode="development" if service.is_development_mode else "live",
    )
