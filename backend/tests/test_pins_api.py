"""
Pinboard Backend — Pin Endpoint Tests
=======================================

What:  HTTP-level tests for /api/pins.
"""

import logging

import pytest

SERVER_ERROR = {"message": "Server error"}


def error_tags(caplog):
    return [
        r.msg for r in caplog.records
        if r.name == "app.services.pin_service" and r.levelno == logging.ERROR
    ]


PIN_DATA = {
    "title": "New Pin",
    "description": "New Description",
    "imageUrl": "new.jpg",
    "userId": "user123",
}


class TestCreatePin:

    @pytest.mark.asyncio
    async def test_create_pin(self, test_client):
        response = await test_client.post("/api/pins", json=PIN_DATA)

        assert response.status_code == 201
        body = response.json()
        assert {k: body[k] for k in ("title", "description", "imageUrl", "user")} == {
            "title": "New Pin",
            "description": "New Description",
            "imageUrl": "new.jpg",
            "user": "user123",
        }
        assert body["id"]

    @pytest.mark.asyncio
    async def test_create_pin_server_error(self, failing_client, caplog):
        response = await failing_client.post("/api/pins", json=PIN_DATA)

        assert response.status_code == 500
        assert response.json() == SERVER_ERROR
        assert error_tags(caplog) == ["Create pin error: %s"]

    @pytest.mark.asyncio
    async def test_create_pin_missing_fields(self, test_client):
        response = await test_client.post(
            "/api/pins", json={"imageUrl": "new.jpg", "userId": "user123"}
        )

        assert response.status_code == 422
        message = response.json()["message"]
        assert message.startswith("Invalid request:")
        assert "body.title" in message
        assert "body.description" in message


class TestReadPins:

    @pytest.mark.asyncio
    async def test_get_pin(self, test_client, make_pin):
        pin = await make_pin()

        response = await test_client.get(f"/api/pins/{pin.id}")

        assert response.status_code == 200
        assert response.json()["id"] == pin.id

    @pytest.mark.asyncio
    async def test_get_pin_not_found(self, test_client):
        response = await test_client.get("/api/pins/missing")

        assert response.status_code == 404
        assert response.json() == {"message": "Pin not found"}

    @pytest.mark.asyncio
    async def test_list_pins_for_user(self, test_client, make_pin):
        await make_pin()
        await make_pin(user="someone-else")

        response = await test_client.get("/api/pins/user/user123")

        assert response.status_code == 200
        assert [p["user"] for p in response.json()] == ["user123"]
        assert response.headers["X-Total-Count"] == "1"

    @pytest.mark.asyncio
    async def test_get_pin_server_error(self, failing_client, caplog):
        response = await failing_client.get("/api/pins/pin123")

        assert response.status_code == 500
        assert response.json() == SERVER_ERROR
        assert error_tags(caplog) == ["Get pin error: %s"]

    @pytest.mark.asyncio
    async def test_list_pins_server_error(self, failing_client, caplog):
        response = await failing_client.get("/api/pins/user/user123")

        assert response.status_code == 500
        assert response.json() == SERVER_ERROR
        assert error_tags(caplog) == ["Get pins error: %s"]
