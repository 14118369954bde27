"""Integration tests for Reports API."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.conftest import FakeTextGenerator


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class TestReportsAPI:
    """Integration tests for Reports API."""

    @pytest.mark.asyncio
    async def test_generate_report_with_entries(
        self,
        authenticated_client: AsyncClient,
        category: dict[str, Any],
        text_generator: FakeTextGenerator,
    ) -> None:
        await authenticated_client.post(
            "/api/v1/entries",
            json={"text": "Slept well #sleep", "category_id": category["id"], "date": _today()},
        )

        response = await authenticated_client.post("/api/v1/reports", json={"period": "Day"})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["period"] == "Day"
        assert data["content"] == text_generator.text
        assert len(text_generator.requests) == 1
        prompt = text_generator.requests[0].prompt
        assert "daily" in prompt
        assert "[Category: Health] Slept well #sleep" in prompt

    @pytest.mark.asyncio
    async def test_generate_report_without_entries_skips_ai(
        self, authenticated_client: AsyncClient, text_generator: FakeTextGenerator
    ) -> None:
        response = await authenticated_client.post("/api/v1/reports", json={"period": "Month"})

        assert response.status_code == 201
        assert response.json()["data"]["content"] == "No entries found for this period."
        assert text_generator.requests == []

    @pytest.mark.asyncio
    async def test_generate_report_invalid_period(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.post("/api/v1/reports", json={"period": "Year"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_list_get_and_delete_reports(self, authenticated_client: AsyncClient) -> None:
        week = await authenticated_client.post("/api/v1/reports", json={"period": "Week"})
        report_id = week.json()["data"]["id"]

        listed = await authenticated_client.get("/api/v1/reports")
        assert [r["id"] for r in listed.json()["data"]] == [report_id]

        fetched = await authenticated_client.get(f"/api/v1/reports/{report_id}")
        assert fetched.json()["data"]["period"] == "Week"

        deleted = await authenticated_client.delete(f"/api/v1/reports/{report_id}")
        assert deleted.status_code == 204

        missing = await authenticated_client.get(f"/api/v1/reports/{report_id}")
        assert missing.status_code == 404
        assert missing.json()["error_code"] == "REPORT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_unknown_report(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.delete(f"/api/v1/reports/{uuid4()}")

        assert response.status_code == 404
