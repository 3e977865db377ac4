# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error body carries "success": false so REST clients can branch on a
# single field, the same way they do for successful responses.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayException(Exception):
    """
    Base exception for the BigQuery gateway.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "GATEWAY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "success": False,
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestError(GatewayException):
    """Raised when a required parameter is missing or blank."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
            status_code=400,
            details={"field": field} if field else None,
        )


# =============================================================================
# BigQuery Operation Exceptions
# =============================================================================

class QueryExecutionError(GatewayException):
    """Raised when a query job fails or times out."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to execute query: {error}",
            code="QUERY_FAILED",
            status_code=500,
            suggestion="Check the SQL syntax and that referenced tables exist",
            details={"error": error},
        )


class TableCreateError(GatewayException):
    """Raised when table creation fails for a reason other than 'already exists'."""

    def __init__(self, table_name: str, error: str):
        super().__init__(
            message=f"Failed to create table: {error}",
            code="TABLE_CREATE_FAILED",
            status_code=500,
            suggestion="Check that the dataset exists and the credentials can create tables",
            details={"table_name": table_name, "error": error},
        )


class DataInsertError(GatewayException):
    """Raised when a streaming insert fails or reports row errors."""

    def __init__(
        self,
        table_name: str,
        error: str,
        row_errors: list[dict[str, Any]] | None = None,
    ):
        details: dict[str, Any] = {"table_name": table_name, "error": error}
        if row_errors:
            details["row_errors"] = row_errors
        super().__init__(
            message=f"Failed to insert data: {error}",
            code="DATA_INSERT_FAILED",
            status_code=500,
            suggestion="Check that the row fields match the table schema",
            details=details,
        )


class TableDeleteError(GatewayException):
    """Raised when table deletion fails."""

    def __init__(self, table_name: str, error: str):
        super().__init__(
            message=f"Failed to delete table: {error}",
            code="TABLE_DELETE_FAILED",
            status_code=500,
            suggestion="Check that the credentials can delete tables in this dataset",
            details={"table_name": table_name, "error": error},
        )


class TableListError(GatewayException):
    """Raised when the dataset's tables cannot be listed."""

    def __init__(self, dataset: str, error: str):
        super().__init__(
            message=f"Failed to list tables: {error}",
            code="TABLE_LIST_FAILED",
            status_code=500,
            suggestion="Check BIGQUERY_PROJECT_ID and BIGQUERY_DATASET_ID",
            details={"dataset": dataset, "error": error},
        )


class HealthCheckError(GatewayException):
    """Raised when the warehouse connectivity check fails."""

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="HEALTH_CHECK_FAILED",
            status_code=500,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "status": "BigQuery connection failed",
            "error": self.message,
        }


# =============================================================================
# Exception Handlers
# =============================================================================

async def gateway_exception_handler(
    request: Request,
    exc: GatewayException
) -> JSONResponse:
    """
    Convert GatewayException to JSON response.

    Client errors are logged as warnings, server errors as errors.
    """
    if exc.status_code < 500:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    else:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict())
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI request validation errors (missing params, wrong body shape).
    """
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        }
    )
