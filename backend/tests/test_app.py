"""
Pinboard Backend — Application-Level Tests
============================================

What:  Health check, request id propagation, rate limiting and settings.
"""

from unittest.mock import AsyncMock, patch

import pytest

from app.config import DEV_DATABASE_URL, Settings, settings


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_ok(self, test_client):
        with patch("app.routes.health.engine") as mock_engine:
            conn = mock_engine.connect.return_value.__aenter__.return_value
            conn.execute = AsyncMock()

            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_database_down(self, test_client):
        with patch("app.routes.health.engine") as mock_engine:
            mock_engine.connect.side_effect = OSError("connection refused")

            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/boards/user/user123")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get(
            "/api/boards/user/user123", headers={"X-Request-ID": "trace-abc"}
        )

        assert response.headers["X-Request-ID"] == "trace-abc"


class TestRateLimit:

    @pytest.mark.asyncio
    async def test_rejects_after_limit(self, test_client):
        with patch.object(settings, "rate_limit_requests", 2):
            first = await test_client.get("/api/boards/user/user123")
            second = await test_client.get("/api/boards/user/user123")
            third = await test_client.get("/api/boards/user/user123")

        assert first.status_code == 200
        assert second.status_code == 200
        assert third.status_code == 429
        assert int(third.headers["Retry-After"]) > 0
        assert "message" in third.json()


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")

    def test_rate_limit_defaults_suit_crud_traffic(self):
        defaults = Settings()

        assert defaults.rate_limit_requests == 600
        assert defaults.rate_limit_window == 60

    def test_production_requires_real_database(self):
        prod = Settings(environment="production", database_url=DEV_DATABASE_URL)

        with pytest.raises(ValueError, match="DATABASE_URL"):
            prod.validate_required_for_production()

    def test_development_defaults_pass(self):
        Settings(environment="development").validate_required_for_production()
