"""
Pytest fixtures and configuration for all tests.
"""

import os

# Settings are required at import time of app.main
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")

import pytest

from app.models.institute import Institute
from app.models.result import Result

from tests.fakes import FakeGateway


@pytest.fixture
def sample_institutes_data():
    """Sample institutes rows."""
    return [
        {"id": 1, "name": "Instituto Alpha"},
        {"id": 2, "name": "Instituto Beta"},
        {"id": 3, "name": "Instituto Gamma"},
    ]


@pytest.fixture
def sample_events_data():
    """Sample events rows."""
    return [
        {"id": 1, "name": "100m Sprint", "type": "INDIVIDUAL"},
        {"id": 2, "name": "Relay 4x100", "type": "GROUP"},
    ]


@pytest.fixture
def sample_results_data():
    """Sample results rows, including one unknown type and one dangling id."""
    return [
        {
            "id": 1,
            "event_name": "100m Sprint",
            "event_type": "INDIVIDUAL",
            "first_place_id": 1,
            "second_place_id": 2,
            "third_place_id": None,
        },
        {
            "id": 2,
            "event_name": "Relay 4x100",
            "event_type": "GROUP",
            "first_place_id": 2,
            "second_place_id": 1,
            "third_place_id": 99,
        },
        {
            "id": 3,
            "event_name": "Mystery",
            "event_type": "RELAY",
            "first_place_id": 3,
            "second_place_id": None,
            "third_place_id": None,
        },
    ]


@pytest.fixture
def sample_institutes(sample_institutes_data):
    return [Institute(**row) for row in sample_institutes_data]


@pytest.fixture
def sample_results(sample_results_data):
    return [Result(**row) for row in sample_results_data]


@pytest.fixture
def fake_gateway(sample_institutes_data, sample_events_data, sample_results_data):
    """Gateway preloaded with the sample tables."""
    return FakeGateway(tables={
        "institutes": sample_institutes_data,
        "events": sample_events_data,
        "results": sample_results_data,
    })
