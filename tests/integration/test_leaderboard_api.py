"""
Integration tests for the Leaderboard API endpoint
"""

import pytest

from app.core.dependencies import get_scoring_table
from app.main import app
from app.services.points_service import EventScoring, ScoringTable

from tests.fakes import FakeGateway


class TestLeaderboardEndpoint:
    """Test suite for GET /leaderboard."""

    @pytest.mark.asyncio
    async def test_get_leaderboard(self, client):
        response = await client.get("/leaderboard")

        assert response.status_code == 200
        data = response.json()
        assert [e["name"] for e in data] == ["Instituto Beta", "Instituto Alpha", "Instituto Gamma"]
        assert data[0] == {
            "id": 2,
            "name": "Instituto Beta",
            "individual": [0, 1, 0],
            "group": [1, 0, 0],
            "total": 27,
        }
        assert data[2]["total"] == 0
        assert data[2]["individual"] == [0, 0, 0]
        assert data[2]["group"] == [0, 0, 0]

    @pytest.mark.asyncio
    async def test_leaderboard_reflects_new_result(self, client):
        created = await client.post("/results", json={
            "event_name": "Chess",
            "event_type": "GROUP",
            "first_place_id": 3,
            "second_place_id": "",
        })
        assert created.status_code == 201

        response = await client.get("/leaderboard")

        gamma = next(e for e in response.json() if e["id"] == 3)
        assert gamma["total"] == 20
        assert gamma["group"] == [1, 0, 0]

    @pytest.mark.asyncio
    async def test_leaderboard_with_custom_scoring(self, client):
        app.dependency_overrides[get_scoring_table] = lambda: ScoringTable(events={
            "RELAY": EventScoring(points=(1, 0, 0), category="group"),
        })

        response = await client.get("/leaderboard")

        assert response.status_code == 200
        data = response.json()
        assert data[0]["name"] == "Instituto Gamma"
        assert data[0]["total"] == 1

    @pytest.mark.asyncio
    async def test_leaderboard_gateway_failure(self, client, fake_gateway):
        fake_gateway.fail_on.add("results")

        response = await client.get("/leaderboard")

        assert response.status_code == 500
        assert response.json() == {"error": "permission denied for table results"}

    @pytest.mark.asyncio
    async def test_leaderboard_institutes_failure(self, client, fake_gateway):
        fake_gateway.fail_on.add("institutes")

        response = await client.get("/leaderboard")

        assert response.status_code == 500
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_leaderboard_with_unnamed_institute(self, client, fake_gateway):
        fake_gateway.tables["institutes"].append({"id": 4, "name": None})
        fake_gateway.tables["results"].append(
            {"id": 4, "event_name": "Chess", "event_type": "GROUP", "first_place_id": 4}
        )

        response = await client.get("/leaderboard")

        assert response.status_code == 200
        unnamed = next(e for e in response.json() if e["id"] == 4)
        assert unnamed["name"] is None
        assert unnamed["total"] == 20

    @pytest.mark.asyncio
    async def test_leaderboard_with_unparseable_result_row(self, client, fake_gateway):
        fake_gateway.tables["results"].append(
            {"id": 4, "event_name": "Broken", "event_type": "GROUP", "first_place_id": [1, 2]}
        )

        response = await client.get("/leaderboard")

        assert response.status_code == 500
        assert response.json()["error"].startswith("Invalid row in table results")
