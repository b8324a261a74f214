"""Shared test fixtures for the sizing engine and API tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


@pytest.fixture
def lahore_payload() -> dict:
    """Reference Lahore household: 856 kWh/month, south-facing, standard pitch."""
    return {
        "monthlyUsage": 856,
        "location": "Lahore",
        "roofDirection": "south",
        "roofType": "standard",
        "shading": "minimal",
    }
