"""Integration tests for API endpoints."""

import pytest
from unittest.mock import patch
from datetime import datetime


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSplitEndpoint:
    """Test POST /split."""

    def test_split(self, test_client):
        response = test_client.post(
            "/split",
            json={"layout": "We 08:00-12:00 14:00-18:00", "reference": "2024-01-17T15:00:00"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["matched"] is True
        assert data["match_index"] == 3
        assert len(data["boundaries"]) == 4
        assert data["boundaries"][0]["weekday"] == "we"
        assert data["boundaries"][0]["closing"] is False
        assert data["boundaries"][3]["closing"] is True
        assert data["formatted"] == "Wed, 17 Jan 08:00-12:00 14:00*18:00"

    def test_split_empty_layout(self, test_client):
        response = test_client.post("/split", json={"layout": "", "reference": "2024-01-17T15:00:00"})
        assert response.status_code == 200
        data = response.json()
        assert data["boundaries"] == []
        assert data["matched"] is False
        assert data["formatted"] == ""

    def test_split_invalid_layout(self, test_client):
        response = test_client.post(
            "/split", json={"layout": "Mo 09:00-", "reference": "2024-01-17T15:00:00"}
        )
        assert response.status_code == 400
        assert "invalid input layout" in response.json()["detail"]

    def test_split_defaults_reference_to_now(self, test_client):
        fixed_now = datetime(2024, 1, 17, 10, 0)
        with patch("openhours.api.app.now", return_value=fixed_now):
            response = test_client.post("/split", json={"layout": "24/7"})
        assert response.status_code == 200
        data = response.json()
        assert data["reference"] == "2024-01-17T10:00:00"
        assert len(data["boundaries"]) == 14
        assert data["matched"] is True


class TestMatchEndpoint:
    """Test POST /match."""

    @pytest.mark.parametrize(
        "layout,expected",
        [
            ("Mo-Fr 08:00-18:00", True),
            ("Mo-Su 11:00-17:00", False),
            ("Sa-Su", False),
        ],
    )
    def test_match(self, test_client, layout, expected):
        response = test_client.post(
            "/match", json={"layout": layout, "reference": "2024-01-17T17:30:00"}
        )
        assert response.status_code == 200
        assert response.json()["matched"] is expected

    def test_match_invalid_layout(self, test_client):
        response = test_client.post(
            "/match", json={"layout": "Mo 09:00-14:00 16:00", "reference": "2024-01-17T17:30:00"}
        )
        assert response.status_code == 400

    def test_match_keeps_reference_offset(self, test_client):
        response = test_client.post(
            "/match", json={"layout": "We 09:00-10:00", "reference": "2024-01-17T09:30:00+01:00"}
        )
        assert response.status_code == 200
        assert response.json()["matched"] is True
