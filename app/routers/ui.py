# =============================================================================
# app/routers/ui.py - Server-Rendered Console Pages
# =============================================================================
# A single HTML page that lists tables and offers query / create / delete
# forms. Each POST performs its action, re-fetches the table list and
# re-renders the page. Errors are shown on the page, never raised, so the
# browser always gets a 200 with HTML.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from app.dependencies import get_bigquery_service
from app.exceptions import GatewayException
from app.templating import render_template
from core.services.bigquery_service import SAMPLE_SCHEMA, BigQueryService

logger = logging.getLogger(__name__)

router = APIRouter()

TEMPLATE_NAME = "bigquery.html"


def _render_page(
    request: Request,
    service: BigQueryService,
    context: dict[str, Any],
    *,
    report_list_error: bool = False,
) -> HTMLResponse:
    """
    Render the console page with a freshly fetched table list.

    A table-list failure is shown on the page only for the initial GET;
    after an action it is just logged so the action's own result stays visible.
    """
    try:
        context["tables"] = service.list_tables()
    except GatewayException as e:
        logger.error(f"Table list failed while rendering page: {e.message}")
        context["tables"] = []
        if report_list_error:
            context["error"] = e.message

    context["dataset"] = service.dataset_path
    context["development_mode"] = service.is_development_mode
    return render_template(request, TEMPLATE_NAME, context)


@router.get("/", response_class=HTMLResponse)
def show_console(
    request: Request,
    service: BigQueryService = Depends(get_bigquery_service),
):
    """Show the console page."""
    return _render_page(request, service, {}, report_list_error=True)


@router.post("/execute-query", response_class=HTMLResponse)
def execute_query(
    request: Request,
    sql: Annotated[str, Form()] = "",
    service: BigQueryService = Depends(get_bigquery_service),
):
    """Run the submitted SQL and render the results table."""
    logger.info(f"Query request received (UI): {sql}")
    context: dict[str, Any] = {"executed_sql": sql}

    try:
        rows = service.run_query(sql)
        context.update(
            query_success=True,
            query_result=rows,
            query_result_count=len(rows),
        )
    except GatewayException as e:
        context.update(query_success=False, query_error=e.message)

    return _render_page(request, service, context)


@router.post("/create-table", response_class=HTMLResponse)
def create_table(
    request: Request,
    table_name: Annotated[str, Form(alias="tableName")] = "",
    service: BigQueryService = Depends(get_bigquery_service),
):
    """Create a table with the sample schema."""
    logger.info(f"Table create request received (UI): {table_name}")
    context: dict[str, Any] = {}

    try:
        created = service.create_table(table_name, SAMPLE_SCHEMA)
        if created:
            message = f"Table '{table_name.strip()}' was created successfully"
        else:
            message = f"Table '{table_name.strip()}' already exists"
        context.update(create_success=True, create_message=message)
    except GatewayException as e:
        context.update(create_success=False, create_error=e.message)

    return _render_page(request, service, context)


@router.post("/delete-table", response_class=HTMLResponse)
def delete_table(
    request: Request,
    table_name: Annotated[str, Form(alias="tableName")] = "",
    service: BigQueryService = Depends(get_bigquery_service),
):
    """Delete a table."""
    logger.info(f"Table delete request received (UI): {table_name}")
    context: dict[str, Any] = {}

    try:
        deleted = service.delete_table(table_name)
        if deleted:
            message = f"Table '{table_name.strip()}' was deleted successfully"
        else:
            message = f"Table '{table_name.strip()}' was not found"
        context.update(delete_success=True, delete_message=message)
    except GatewayException as e:
        context.update(delete_success=False, delete_error=e.message)

    return _render_page(request, service, context)
