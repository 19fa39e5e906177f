"""
Basic application tests.

Checks that the app boots, the health endpoint answers, and settings
and logging pick up their overrides.
"""

import logging

from fastapi.testclient import TestClient

from proprials.core.config import Settings, settings
from proprials.infrastructure.investing.in_memory_ledger import InMemoryLedgerRepository
from proprials.interfaces.investing.dependencies import get_ledger_repository
from proprials.main import app
from proprials.shared.logging import configure_logging
from tests.factories import make_property

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        ledger = InMemoryLedgerRepository()
        ledger.load(properties=[make_property("p1"), make_property("p2")])
        app.dependency_overrides[get_ledger_repository] = lambda: ledger
        try:
            body = client.get("/api/v1/health").json()
        finally:
            app.dependency_overrides.clear()

        assert body["status"] == "ok"
        assert body["version"] == settings.version
        assert body["properties"] == 2
        assert body["uptime_seconds"] >= 0


class TestSettings:
    def test_latency_conversion(self) -> None:
        tuned = settings.model_copy(update={"simulated_latency_ms": 750})
        assert tuned.simulated_latency_seconds == 0.75

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("SIMULATED_LATENCY_MS", "500")
        monkeypatch.setenv("SEED_DEMO_CATALOG", "false")
        overridden = Settings()
        assert overridden.simulated_latency_ms == 500
        assert overridden.seed_demo_catalog is False


class TestLogging:
    def test_level_applied(self) -> None:
        logger = configure_logging("debug")
        assert logger.name == "proprials"
        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert configure_logging("chatty").level == logging.INFO
