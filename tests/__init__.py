# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the BigQuery Gateway:
# - test_bigquery_service.py: Service validation, live calls, development mode
# - test_bigquery_client.py: Client construction and fallback
# - test_api.py: REST endpoints and error translation
# - test_ui.py: Server-rendered console page
# - test_config.py: Settings parsing and validation
#
# Run tests with: pytest
# =============================================================================
