"""
Integration tests for metrics tracking.

These tests verify:
1. Prometheus metrics are exposed on /metrics
2. Quote outcomes and lending rates are counted
3. Group usage and config backend attempts are counted
"""

import pytest
from httpx import AsyncClient

from src.core.metrics import REGISTRY
from tests.factories import FakeConfigBackend, get_min_valid_query_params


def _sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "# HELP" in response.text

    @pytest.mark.asyncio
    async def test_metrics_include_service_metrics(
        self,
        client: AsyncClient,
    ):
        await client.get("/v1/credit", params=get_min_valid_query_params())

        content = (await client.get("/metrics")).text

        assert "vbank_quote_total" in content
        assert "vbank_lending_rate_percent" in content
        assert "vbank_usage_tracked_total" in content
        assert "vbank_config_backend_requests_total" in content
        assert "vbank_http_requests_total" in content


# =============================================================================
# Quote Metrics Tests
# =============================================================================

class TestQuoteMetrics:
    """Tests for quote-related metrics tracking."""

    @pytest.mark.asyncio
    async def test_quote_increments_counters(self, client: AsyncClient):
        quoted = _sample("vbank_quote_total", outcome="quoted")
        rates = _sample("vbank_lending_rate_percent_count")
        tracked = _sample("vbank_usage_tracked_total", outcome="tracked")
        latency = _sample("vbank_quote_latency_seconds_count")

        response = await client.get("/v1/credit", params=get_min_valid_query_params())

        assert response.status_code == 200
        assert _sample("vbank_quote_total", outcome="quoted") == quoted + 1
        assert _sample("vbank_lending_rate_percent_count") == rates + 1
        assert _sample("vbank_usage_tracked_total", outcome="tracked") == tracked + 1
        assert _sample("vbank_quote_latency_seconds_count") == latency + 1

    @pytest.mark.asyncio
    async def test_invalid_request_is_counted(self, client: AsyncClient):
        before = _sample("vbank_quote_total", outcome="invalid")

        response = await client.get("/v1/credit")

        assert response.status_code == 400
        assert _sample("vbank_quote_total", outcome="invalid") == before + 1

    @pytest.mark.asyncio
    async def test_unknown_group_is_counted(self, client: AsyncClient):
        quotes = _sample("vbank_quote_total", outcome="not_found")
        usage = _sample("vbank_usage_tracked_total", outcome="group_not_found")

        response = await client.get(
            "/v1/credit",
            params=get_min_valid_query_params(username="NoSuchGroup"),
        )

        assert response.status_code == 404
        assert _sample("vbank_quote_total", outcome="not_found") == quotes + 1
        assert _sample("vbank_usage_tracked_total", outcome="group_not_found") == usage + 1


# =============================================================================
# Config Backend Metrics Tests
# =============================================================================

class TestConfigBackendMetrics:
    """Tests for config backend attempt tracking."""

    @pytest.mark.asyncio
    async def test_attempts_are_counted_per_method(self, client: AsyncClient):
        gets = _sample("vbank_config_backend_requests_total", method="GET", outcome="success")
        puts = _sample("vbank_config_backend_requests_total", method="PUT", outcome="success")

        await client.get("/v1/credit", params=get_min_valid_query_params())

        assert _sample(
            "vbank_config_backend_requests_total", method="GET", outcome="success"
        ) == gets + 3
        assert _sample(
            "vbank_config_backend_requests_total", method="PUT", outcome="success"
        ) == puts + 1

    @pytest.mark.asyncio
    async def test_backend_outage_is_counted(
        self,
        client: AsyncClient,
        config_backend: FakeConfigBackend,
    ):
        config_backend.status_code = 503
        quotes = _sample("vbank_quote_total", outcome="backend_error")
        retries = _sample("vbank_config_backend_retries_total", method="GET")

        response = await client.get("/v1/credit", params=get_min_valid_query_params())

        assert response.status_code == 503
        assert _sample("vbank_quote_total", outcome="backend_error") == quotes + 1
        assert _sample("vbank_config_backend_retries_total", method="GET") == retries + 2
