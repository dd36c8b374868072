"""
Basic application tests.

Validates that the FastAPI app starts correctly, that the
health and greeting endpoints respond as expected and that
settings reject unusable unwind amounts.
"""

import io
from decimal import Decimal

import pytest
from a2wsgi import ASGIMiddleware
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.core.config import Settings, settings
from app.main import app

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/api/v1/health").json()
        assert body == {"status": "ok", "version": settings.version}


class TestGreetingEndpoints:
    """Tests for the hello/echo smoke endpoints."""

    def test_hello(self) -> None:
        response = client.get("/api/v1/hello")
        assert response.status_code == 200
        assert response.json() == {"message": f"Hello from {settings.project_name}!"}

    def test_echo(self) -> None:
        response = client.post("/api/v1/echo", content="test message")
        assert response.status_code == 200
        assert response.json() == {"message": "Echo: test message"}

    def test_echo_rejects_invalid_utf8(self) -> None:
        response = client.post("/api/v1/echo", content=b"\xff\xfe")
        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Malformed request body"
        assert body["kind"] == "parse"
        assert "trade" not in body["detail"]


class TestSettings:
    """Tests for configuration validation."""

    def test_default_reduction_terms(self) -> None:
        terms = Settings().get_reduction_terms()
        assert terms.reduction_amount == Decimal("70000")
        assert terms.currency_code == "USD"

    def test_negative_reduction_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(reduction_amount="-1")

    def test_overly_precise_reduction_amount_rejected(self) -> None:
        with pytest.raises(ValidationError, match="significant digits"):
            Settings(reduction_amount="12345678901234567.25")

    def test_fractional_reduction_amount_accepted(self) -> None:
        assert Settings(reduction_amount="70000.25").reduction_amount == Decimal("70000.25")


class TestWsgiApplication:
    """The WSGI entry point wraps the same ASGI app."""

    def test_application_is_wsgi_wrapper(self) -> None:
        from app.wsgi import application

        assert isinstance(application, ASGIMiddleware)

    def test_wsgi_serves_health(self) -> None:
        from app.wsgi import application

        captured: dict = {}

        def start_response(status, headers, exc_info=None):
            captured["status"] = status
            captured["headers"] = dict(headers)

        environ = {
            "REQUEST_METHOD": "GET",
            "SCRIPT_NAME": "",
            "PATH_INFO": "/api/v1/health",
            "QUERY_STRING": "",
            "SERVER_NAME": "testserver",
            "SERVER_PORT": "80",
            "SERVER_PROTOCOL": "HTTP/1.1",
            "REMOTE_ADDR": "127.0.0.1",
            "wsgi.url_scheme": "http",
            "wsgi.input": io.BytesIO(b""),
            "wsgi.errors": io.StringIO(),
            "wsgi.version": (1, 0),
            "wsgi.multithread": False,
            "wsgi.multiprocess": False,
            "wsgi.run_once": False,
        }
        body = b"".join(application(environ, start_response))

        assert captured["status"].startswith("200")
        assert b'"status":"ok"' in body
