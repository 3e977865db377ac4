# =============================================================================
# core/services/bigquery_service.py - BigQuery Operations
# =============================================================================
# Maps each gateway operation onto one BigQuery client call:
# - run_query    -> client.query(...).result()
# - create_table -> client.create_table(...)
# - insert_data  -> client.insert_rows_json(...)
# - delete_table -> client.delete_table(...)
# - list_tables  -> client.list_tables(...)
#
# Parameters are validated before anything else, so a blank table name is a
# 400 even in development mode. When the service holds no client it logs the
# simulated action and returns sample data.
# =============================================================================

import base64
import datetime
import decimal
import logging
import math
from typing import Any, Sequence

from google.api_core.exceptions import Conflict, NotFound
from google.cloud import bigquery

from app.exceptions import (
    DataInsertError,
    InvalidRequestError,
    QueryExecutionError,
    TableCreateError,
    TableDeleteError,
    TableListError,
)

logger = logging.getLogger(__name__)

# Schema used by both the REST and UI "create table" actions
SAMPLE_SCHEMA: list[bigquery.SchemaField] = [
    bigquery.SchemaField("id", "INT64"),
    bigquery.SchemaField("name", "STRING"),
    bigquery.SchemaField("email", "STRING"),
    bigquery.SchemaField("created_at", "TIMESTAMP"),
]

SAMPLE_QUERY_ROWS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Sample User 1",
        "email": "sample1@example.com",
        "created_at": "2023-01-01T00:00:00Z",
    },
    {
        "id": 2,
        "name": "Sample User 2",
        "email": "sample2@example.com",
        "created_at": "2023-01-02T00:00:00Z",
    },
]

SAMPLE_TABLES: list[str] = ["sample_table1", "sample_table2", "users", "products"]

HEALTH_CHECK_SQL = "SELECT 1 AS health_check"


def _to_json_value(value: Any) -> Any:
    """
    Convert a BigQuery cell to a JSON-native value.

    BYTES become base64 text, NUMERIC/BIGNUMERIC become decimal strings,
    DATE/TIME/DATETIME/TIMESTAMP become ISO 8601 strings, and non-finite
    FLOAT64 values become "NaN", "Infinity" or "-Infinity" (the same
    spellings the BigQuery REST API uses). ARRAY and STRUCT are converted
    element by element.
    """
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return value
    if isinstance(value, decimal.Decimal):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(item) for item in value]
    return value


def _require_table_name(table_name: str | None) -> str:
    if table_name is None or not table_name.strip():
        raise InvalidRequestError("Table name is empty", field="table_name")
    return table_name.strip()


class BigQueryService:
    """
    Service for BigQuery dataset operations.

    Provides a clean interface between API routes and the BigQuery client.
    All table operations are scoped to one project and dataset.

    Pass client=None to run in development mode.
    """

    def __init__(
        self,
        project_id: str,
        dataset_id: str,
        client: bigquery.Client | None = None,
        query_timeout: float | None = None,
    ):
        self.project_id = project_id
        self.dataset_id = dataset_id
        self.client = client
        self.query_timeout = query_timeout

        mode = "development" if client is None else "live"
        logger.info(
            f"BigQueryService initialized in {mode} mode "
            f"with project: {project_id}, dataset: {dataset_id}"
        )

    @property
    def is_development_mode(self) -> bool:
        return self.client is None

    @property
    def dataset_path(self) -> str:
        return f"{self.project_id}.{self.dataset_id}"

    def table_path(self, table_name: str) -> str:
        """Fully-qualified table ID: project.dataset.table"""
        return f"{self.dataset_path}.{table_name}"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def run_query(self, sql: str | None) -> list[dict[str, Any]]:
        """
        Run a SQL query and return all result rows.

        Unqualified table names resolve against the configured dataset.

        Args:
            sql: Standard SQL statement

        Returns:
            List of rows, each a dict of column name to JSON-native value
            (NULL -> None, see _to_json_value for the other conversions)

        Raises:
            InvalidRequestError: If sql is empty
            QueryExecutionError: If the job fails or times out
        """
        if sql is None or not sql.strip():
            raise InvalidRequestError("SQL query is empty", field="sql")

        if self.client is None:
            logger.info(f"Development mode: returning sample rows for query: {sql}")
            return [dict(row) for row in SAMPLE_QUERY_ROWS]

        try:
            logger.info(f"Running BigQuery query: {sql}")
            job_config = bigquery.QueryJobConfig(default_dataset=self.dataset_path)
            query_job = self.client.query(sql, job_config=job_config)
            result = query_job.result(timeout=self.query_timeout)

            rows = [
                {key: _to_json_value(value) for key, value in row.items()}
                for row in result
            ]

            logger.info(f"BigQuery query finished: {len(rows)} rows")
            return rows

        except Exception as e:
            logger.error(f"BigQuery query failed: {e}")
            raise QueryExecutionError(str(e)) from e

    def check_health(self) -> None:
        """
        Check warehouse connectivity with a trivial query.

        Raises:
            QueryExecutionError: If the check query fails
        """
        self.run_query(HEALTH_CHECK_SQL)

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def create_table(
        self,
        table_name: str | None,
        schema: Sequence[bigquery.SchemaField] | None,
    ) -> bool:
        """
        Create a table in the configured dataset.

        An already-existing table is not an error.

        Returns:
            True if the table was created, False if it already existed

        Raises:
            InvalidRequestError: If table_name is empty or schema is missing
            TableCreateError: If creation fails
        """
        table_name = _require_table_name(table_name)
        if schema is None:
            raise InvalidRequestError("Schema is not specified", field="schema")

        if self.client is None:
            logger.info(f"Development mode: simulated creating table '{table_name}'")
            return True

        table_id = self.table_path(table_name)
        try:
            logger.info(f"Creating BigQuery table: {table_id}")
            table = self.client.create_table(bigquery.Table(table_id, schema=list(schema)))
            logger.info(f"BigQuery table created: {table.full_table_id}")
            return True

        except Conflict:
            logger.warning(f"Table already exists: {table_id}")
            return False

        except Exception as e:
            logger.error(f"BigQuery table creation failed: {e}")
            raise TableCreateError(table_name, str(e)) from e

    def insert_data(
        self,
        table_name: str | None,
        rows: list[dict[str, Any]] | None,
    ) -> int:
        """
        Stream rows into a table.

        Returns:
            Number of rows inserted

        Raises:
            InvalidRequestError: If table_name or rows is empty
            DataInsertError: If the request fails or any row is rejected
        """
        table_name = _require_table_name(table_name)
        if not rows:
            raise InvalidRequestError("No rows to insert", field="rows")

        if self.client is None:
            logger.info(
                f"Development mode: simulated inserting {len(rows)} rows into '{table_name}'"
            )
            return len(rows)

        table_id = self.table_path(table_name)
        try:
            logger.info(f"Inserting {len(rows)} rows into BigQuery table: {table_id}")
            errors = self.client.insert_rows_json(table_id, rows)
        except Exception as e:
            logger.error(f"BigQuery insert failed: {e}")
            raise DataInsertError(table_name, str(e)) from e

        if errors:
            logger.error(f"BigQuery insert reported row errors: {errors}")
            raise DataInsertError(
                table_name,
                f"{len(errors)} rows were rejected",
                row_errors=errors,
            )

        logger.info(f"BigQuery insert finished: {len(rows)} rows")
        return len(rows)

    def delete_table(self, table_name: str | None) -> bool:
        """
        Delete a table from the configured dataset.

        A missing table is not an error.

        Returns:
            True if the table was deleted, False if it did not exist

        Raises:
            InvalidRequestError: If table_name is empty
            TableDeleteError: If deletion fails
        """
        table_name = _require_table_name(table_name)

        if self.client is None:
            logger.info(f"Development mode: simulated deleting table '{table_name}'")
            return True

        table_id = self.table_path(table_name)
        try:
            logger.info(f"Deleting BigQuery table: {table_id}")
            self.client.delete_table(table_id)
            logger.info(f"BigQuery table deleted: {table_id}")
            return True

        except NotFound:
            logger.warning(f"Table not found: {table_id}")
            return False

        except Exception as e:
            logger.error(f"BigQuery table deletion failed: {e}")
            raise TableDeleteError(table_name, str(e)) from e

    def list_tables(self) -> list[str]:
        """
        List table names in the configured dataset.

        Raises:
            TableListError: If listing fails
        """
        if self.client is None:
            logger.info("Development mode: returning sample table list")
            return list(SAMPLE_TABLES)

        try:
            logger.info(f"Listing BigQuery tables: {self.dataset_path}")
            table_names = [table.table_id for table in self.client.list_tables(self.dataset_path)]
            logger.info(f"BigQuery table list finished: {len(table_names)} tables")
            return table_names

        except Exception as e:
            logger.error(f"BigQuery table listing failed: {e}")
            raise TableListError(self.dataset_path, str(e)) from e
