"""Pytest fixtures and configuration for openhours tests."""

import pytest
from datetime import datetime
from zoneinfo import ZoneInfo
from fastapi.testclient import TestClient

from openhours.parser.splitter import Splitter


@pytest.fixture
def wednesday_evening():
    """Wednesday 17 January 2024, 17:30 (naive)."""
    return datetime(2024, 1, 17, 17, 30)


@pytest.fixture
def sunday_evening():
    """Sunday 13 November 2022, 17:30 (naive)."""
    return datetime(2022, 11, 13, 17, 30)


@pytest.fixture
def berlin_reference():
    """Wednesday 17 January 2024, 09:15 in Europe/Berlin."""
    return datetime(2024, 1, 17, 9, 15, tzinfo=ZoneInfo("Europe/Berlin"))


@pytest.fixture
def splitter(wednesday_evening):
    """Splitter anchored at Wednesday 17:30."""
    return Splitter(wednesday_evening)


@pytest.fixture
def test_client():
    """Create a FastAPI test client."""
    from openhours.api.app import app

    with TestClient(app) as client:
        yield client
