"""Test fixtures for contract testing."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def test_client() -> TestClient:
    """FastAPI test client for contract testing."""
    from command_bridge.app import app

    return TestClient(app)


@pytest.fixture
def openapi_schema(test_client: TestClient) -> Dict[str, Any]:
    """Fetch current OpenAPI schema from the API."""
    response = test_client.get("/openapi.json")
    assert response.status_code == 200, "Failed to fetch OpenAPI schema"
    return response.json()
