# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the BigQuery Gateway.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app import __version__
from app.config import settings
from app.dependencies import get_bigquery_service
from app.exceptions import (
    GatewayException,
    gateway_exception_handler,
    validation_exception_handler,
)
from app.routers import bigquery_api, health, ui

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the BigQuery service on startup so the live/development decision
    is logged once, before the first request.
    """
    logger.info(f"Starting BigQuery Gateway in {settings.ENVIRONMENT} mode")
    logger.info(f"Dataset: {settings.dataset_path}")

    # Client construction may block on credential discovery
    service = await run_in_threadpool(get_bigquery_service)
    if service.is_development_mode:
        logger.warning("No BigQuery connection, serving sample data (development mode)")

    yield

    logger.info("Shutting down BigQuery Gateway")


# Create FastAPI application
app = FastAPI(
    title="BigQuery Gateway",
    description="""
## BigQuery Gateway

Thin HTTP front end for one BigQuery dataset: run queries, list tables,
create a sample table, insert rows, and delete tables.

Without Google credentials the gateway runs in **development mode** and
returns sample data.

### Quick Start

```bash
curl "http://localhost:8080/bigquery/api/query?sql=SELECT%201"
curl -X POST http://localhost:8080/bigquery/api/table/users
curl -X POST http://localhost:8080/bigquery/api/table/users/data \\
  -H "Content-Type: application/json" \\
  -d '[{"id": 1, "name": "Alice", "email": "alice@example.com"}]'
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "BigQuery",
            "description": "Queries and table operations (JSON)",
        },
        {
            "name": "Console",
            "description": "Server-rendered console page",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(GatewayException, gateway_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    bigquery_api.router,
    prefix="/bigquery/api",
    tags=["BigQuery"]
)

app.include_router(
    ui.router,
    tags=["Console"]
)

app.include_router(
    health.router,
    tags=["Health"]
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
