"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_title_and_description(self, schema: dict) -> None:
        """OpenAPI schema has correct title and description."""
        assert schema["info"]["title"] == "signupflow"
        assert "Signup API" in schema["info"]["description"]
        assert schema["info"]["version"] == "0.1.0"

    def test_password_policy_endpoint_in_schema(self, schema: dict) -> None:
        """POST /v1/password-policy is documented."""
        assert "/v1/password-policy" in schema["paths"]
        operation = schema["paths"]["/v1/password-policy"]["post"]
        assert operation["summary"] == "Evaluate password rules"

    def test_signup_endpoint_in_schema(self, schema: dict) -> None:
        """POST /v1/signup is documented with its error responses."""
        assert "/v1/signup" in schema["paths"]
        operation = schema["paths"]["/v1/signup"]["post"]
        assert operation["summary"] == "Sign up a new user"
        for code in ("201", "400", "422", "500", "502"):
            assert code in operation["responses"]

    def test_signup_is_multipart(self, schema: dict) -> None:
        """Signup accepts multipart form data for the profile image."""
        operation = schema["paths"]["/v1/signup"]["post"]
        assert "multipart/form-data" in operation["requestBody"]["content"]

    def test_password_policy_response_schema(self, schema: dict) -> None:
        """PasswordPolicyResponse exposes rules and valid."""
        properties = schema["components"]["schemas"]["PasswordPolicyResponse"]["properties"]
        assert "rules" in properties
        assert "valid" in properties
