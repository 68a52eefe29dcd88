"""
OpenAPI schema tests for the command boundary.

The frontend only knows command names, argument shapes and result shapes;
these tests pin the parts of the schema it relies on.
"""

import json
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

import command_bridge


class TestOpenAPISchema:
    """Validate OpenAPI schema structure and the invoke contract."""

    INVOKE_PATH = "/commands/{command_name}"

    def _resolve(self, openapi_schema: Dict[str, Any], schema: Dict[str, Any]) -> Dict[str, Any]:
        """Resolve $ref if present"""
        if "$ref" in schema:
            ref_name = schema["$ref"].split("/")[-1]
            return openapi_schema["components"]["schemas"][ref_name]
        return schema

    def test_openapi_endpoint_accessible(self, test_client: TestClient) -> None:
        response = test_client.get("/openapi.json")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"

    def test_openapi_version_is_3x(self, openapi_schema: Dict[str, Any]) -> None:
        version = openapi_schema["openapi"]
        assert version.startswith("3."), f"Expected OpenAPI 3.x, got {version}"

    def test_api_metadata(self, openapi_schema: Dict[str, Any]) -> None:
        info = openapi_schema["info"]

        assert info["title"] == "Command Bridge"
        assert info["version"] == command_bridge.__version__

    def test_boundary_endpoints_documented(self, openapi_schema: Dict[str, Any]) -> None:
        paths = openapi_schema.get("paths", {})

        expected = ["/commands/", self.INVOKE_PATH, "/healthz", "/"]
        missing = [ep for ep in expected if ep not in paths]

        assert not missing, f"Endpoints missing from schema: {missing}"
        assert "post" in paths[self.INVOKE_PATH]

    def test_invoke_request_body_is_optional(self, openapi_schema: Dict[str, Any]) -> None:
        post_op = openapi_schema["paths"][self.INVOKE_PATH]["post"]

        assert post_op["requestBody"].get("required", False) is False

    def test_invoke_response_fields(self, openapi_schema: Dict[str, Any]) -> None:
        post_op = openapi_schema["paths"][self.INVOKE_PATH]["post"]
        schema = self._resolve(
            openapi_schema,
            post_op["responses"]["200"]["content"]["application/json"]["schema"],
        )

        required = schema.get("required", [])
        for field in ["invocation_id", "command_name", "status", "execution_time_ms"]:
            assert field in required, f"Missing required field: {field}"
        assert "data" in schema["properties"]
        assert "error" in schema["properties"]

    def test_invoke_status_is_tagged(self, openapi_schema: Dict[str, Any]) -> None:
        post_op = openapi_schema["paths"][self.INVOKE_PATH]["post"]
        schema = self._resolve(
            openapi_schema,
            post_op["responses"]["200"]["content"]["application/json"]["schema"],
        )

        status = schema["properties"]["status"]
        if "allOf" in status:
            status = status["allOf"][0]
        status = self._resolve(openapi_schema, status)

        assert sorted(status["enum"]) == ["failure", "success"]

    def test_error_status_codes_documented(self, openapi_schema: Dict[str, Any]) -> None:
        responses = openapi_schema["paths"][self.INVOKE_PATH]["post"]["responses"]

        assert "404" in responses
        assert "400" in responses

    def test_schema_is_json_serializable(self, openapi_schema: Dict[str, Any]) -> None:
        try:
            json_str = json.dumps(openapi_schema)
            assert len(json_str) > 0
        except (TypeError, ValueError) as e:
            pytest.fail(f"Schema is not JSON serializable: {e}")
