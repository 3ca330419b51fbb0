"""Integration tests for import API endpoints."""

import json

from httpx import AsyncClient

ACTIVITIES = [{"id": "a1", "name": "Survey"}, {"id": "a2", "name": "Construction"}]


class TestImportTasksEndpoint:
    """Integration tests for POST /imports/tasks endpoint."""

    async def test_json_file(self, client: AsyncClient) -> None:
        """Valid rows are returned as tasks and invalid ones as errors."""
        content = json.dumps(
            [
                {
                    "title": "Site visit",
                    "status": "Not Started",
                    "activityId": "Survey",
                    "startDate": "2025-01-01",
                    "endDate": "2025-01-03",
                },
                {"title": "Orphan", "status": "Not Started", "activityId": "Nowhere"},
            ]
        )

        response = await client.post(
            "/imports/tasks",
            json={"format": "json", "content": content, "activities": ACTIVITIES},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["imported"] == 1
        assert data["records"][0]["activityId"] == "a1"
        assert data["records"][0]["duration"] == 3
        assert data["errors"][0].startswith('Task "Orphan": Activity "Nowhere" does not exist')

    async def test_csv_file(self, client: AsyncClient) -> None:
        """CSV uploads are read by header."""
        content = "title,status,activityId,startDate,endDate\nPour,Completed,a2,2025-02-01,2025-02-02\n"

        response = await client.post(
            "/imports/tasks",
            json={"format": "csv", "content": content, "activities": ACTIVITIES},
        )

        assert response.status_code == 200
        assert response.json()["records"][0]["status"] == "Completed"

    async def test_malformed_file(self, client: AsyncClient) -> None:
        """Unreadable content returns 400."""
        response = await client.post(
            "/imports/tasks",
            json={"format": "json", "content": '{"title": "Dig"}', "activities": ACTIVITIES},
        )

        assert response.status_code == 400
        assert "Expected an array" in response.json()["detail"]

    async def test_unknown_format(self, client: AsyncClient) -> None:
        """Unsupported formats fail request validation."""
        response = await client.post(
            "/imports/tasks",
            json={"format": "xlsx", "content": ""},
        )

        assert response.status_code == 422


class TestImportRisksEndpoint:
    """Integration tests for POST /imports/risks endpoint."""

    async def test_json_file(self, client: AsyncClient) -> None:
        """Risk rows map activity names to ids."""
        content = json.dumps(
            [
                {
                    "name": "Supplier delay",
                    "description": "Steel arrives late",
                    "impact": 4,
                    "probability": 4,
                    "associatedActivities": ["Construction"],
                }
            ]
        )

        response = await client.post(
            "/imports/risks",
            json={"format": "json", "content": content, "activities": ACTIVITIES},
        )

        assert response.status_code == 200
        risk = response.json()["records"][0]
        assert risk["associatedActivities"] == ["a2"]
        assert risk["riskScore"] == 16
        assert risk["status"] == "Active"
