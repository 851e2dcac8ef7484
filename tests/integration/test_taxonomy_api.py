"""Integration tests for the label list endpoints."""

import pytest
from httpx import AsyncClient

from osfinder.models.category import TechStack


class TestLabelLists:
    @pytest.mark.asyncio
    async def test_categories_sorted_by_name(self, client: AsyncClient, seeded_labels):
        response = await client.get("/api/v1/categories")

        assert response.status_code == 200
        names = [c["name"] for c in response.json()]
        assert names == ["Productivity", "Project Management", "Task Management"]

    @pytest.mark.asyncio
    async def test_proprietary(self, client: AsyncClient, seeded_labels):
        response = await client.get("/api/v1/proprietary")

        assert response.status_code == 200
        data = response.json()
        assert [p["slug"] for p in data] == ["trello"]
        assert data[0]["id"] == str(seeded_labels["trello"].id)

    @pytest.mark.asyncio
    async def test_tech_stacks(self, client: AsyncClient, db_session):
        db_session.add(TechStack(name="Go", slug="go", category="language"))
        await db_session.commit()

        response = await client.get("/api/v1/tech-stacks")

        assert response.status_code == 200
        assert response.json()[0]["category"] == "language"

    @pytest.mark.asyncio
    async def test_empty_store(self, client: AsyncClient):
        response = await client.get("/api/v1/categories")

        assert response.status_code == 200
        assert response.json() == []
