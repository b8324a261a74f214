"""Tests for the system sizing endpoint."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

URL = "/api/v1/system-sizing"


# ======================================================================
# Successful estimates
# ======================================================================


class TestSystemSizing:
    async def test_reference_estimate(self, client: AsyncClient, lahore_payload):
        resp = await client.post(URL, json=lahore_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["systemSize"] == 8.5
        assert data["recommendedRange"] == {"minimum": 6.0, "recommended": 8.5, "maximum": 10.0}
        assert data["efficiencyFactors"]["systemEfficiency"] == 72
        assert data["equipment"]["panelOptions"][0] == {
            "power": 450, "count": 19, "roofArea": 34, "totalCost": 855_000,
        }
        assert data["costs"]["total"] == 1_293_800
        assert len(data["production"]["byMonth"]) == 12
        assert data["metadata"]["location"] == "Lahore"

    async def test_response_has_all_sections(self, client: AsyncClient):
        resp = await client.post(URL, json={"monthlyUsage": 400})
        assert resp.status_code == 200
        assert set(resp.json()) == {
            "systemSize", "recommendedRange", "efficiencyFactors", "equipment",
            "costs", "roof", "battery", "production", "consumption", "weather",
            "metadata",
        }

    async def test_integer_fields_stay_integers(self, client: AsyncClient, lahore_payload):
        resp = await client.post(URL, json=lahore_payload)
        data = resp.json()
        assert isinstance(data["costs"]["total"], int)
        assert isinstance(data["efficiencyFactors"]["direction"], int)
        assert isinstance(data["consumption"]["peak"]["kWh"], int)
        assert data["equipment"]["inverter"]["size"] == 10

    async def test_force_size(self, client: AsyncClient):
        resp = await client.post(URL, json={"monthlyUsage": 856, "forceSize": 5.0})
        assert resp.status_code == 200
        data = resp.json()
        assert data["systemSize"] == 5.0
        assert data["equipment"]["inverter"] == {"size": 5, "count": 1, "totalCost": 120_000}

    async def test_unknown_selectors_defaulted(self, client: AsyncClient):
        resp = await client.post(
            URL,
            json={"monthlyUsage": 600, "location": "Mars", "roofType": 7, "shading": None},
        )
        assert resp.status_code == 200
        meta = resp.json()["metadata"]
        assert meta["location"] == "Central Pakistan"
        assert meta["roofType"] == "standard"
        assert meta["shading"] == "minimal"

    async def test_numeric_string_usage(self, client: AsyncClient):
        resp = await client.post(URL, json={"monthlyUsage": "856", "location": "Lahore"})
        assert resp.status_code == 200
        assert resp.json()["systemSize"] == 8.5

    async def test_whole_number_sizes_serialise_without_fraction(
        self, client: AsyncClient, lahore_payload
    ):
        resp = await client.post(URL, json=lahore_payload)
        assert '"systemSize":8.5' in resp.text
        assert '"recommendedRange":{"minimum":6,"recommended":8.5,"maximum":10}' in resp.text

        resp = await client.post(URL, json={"monthlyUsage": 856, "forceSize": 8})
        assert '"systemSize":8,' in resp.text

    async def test_force_size_above_ceiling_ignored(self, client: AsyncClient):
        resp = await client.post(URL, json={"monthlyUsage": 500, "forceSize": 1e306})
        assert resp.status_code == 200
        derived = await client.post(URL, json={"monthlyUsage": 500})
        assert resp.json()["systemSize"] == derived.json()["systemSize"]

    async def test_request_id_header(self, client: AsyncClient):
        resp = await client.post(
            URL, json={"monthlyUsage": 300}, headers={"X-Request-ID": "abc123"}
        )
        assert resp.headers["X-Request-ID"] == "abc123"


# ======================================================================
# Errors
# ======================================================================


class TestSystemSizingErrors:
    @pytest.mark.parametrize("usage", [0, -10, "abc", None, True])
    async def test_invalid_usage(self, client: AsyncClient, usage):
        resp = await client.post(URL, json={"monthlyUsage": usage, "location": "Lahore"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Valid monthly usage in kWh is required"}

    @pytest.mark.parametrize("usage", [1.5e308, 1e12])
    async def test_usage_above_ceiling(self, client: AsyncClient, usage):
        resp = await client.post(URL, json={"monthlyUsage": usage})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Valid monthly usage in kWh is required"}

    async def test_missing_usage(self, client: AsyncClient):
        resp = await client.post(URL, json={"location": "Karachi"})
        assert resp.status_code == 400
        assert "error" in resp.json()

    async def test_body_not_an_object(self, client: AsyncClient):
        resp = await client.post(URL, json=[1, 2, 3])
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid request body"}

    async def test_internal_fault_is_generic(self, client: AsyncClient, monkeypatch):
        from app.api.v1 import system_sizing

        def _boom(payload):
            raise RuntimeError("irradiance table corrupted")

        monkeypatch.setattr(system_sizing, "calculate_system_size", _boom)

        resp = await client.post(URL, json={"monthlyUsage": 500})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to calculate system size"}
        assert "corrupted" not in resp.text
