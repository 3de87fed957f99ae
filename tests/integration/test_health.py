"""Integration tests for the health and root endpoints."""

import pytest
from httpx import AsyncClient

from src import __version__
from src.core.config import settings
from src.main import app


class TestHealth:
    """Tests for GET /v1/health."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": __version__,
            "bank": "vbank",
        }

    @pytest.mark.asyncio
    async def test_root_redirects_to_docs(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 307
        assert response.headers["location"] == "/docs"


class TestAppSettings:
    """Tests for settings applied to the application object."""

    def test_debug_follows_settings(self):
        assert app.debug is settings.debug
