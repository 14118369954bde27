"""Integration tests for Entries API."""

from typing import Any
from uuid import uuid4

import pytest
from httpx import AsyncClient

MOSCOW = {"X-Timezone": "Europe/Moscow"}


class TestEntriesAPI:
    """Integration tests for Entries API."""

    @pytest.mark.asyncio
    async def test_create_entry_extracts_tags(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        response = await authenticated_client.post(
            "/api/v1/entries",
            json={"text": "Long walk #health #Evening", "category_id": category["id"]},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["text"] == "Long walk #health #Evening"
        assert data["tags"] == ["#health", "#Evening"]
        assert data["category_id"] == category["id"]

    @pytest.mark.asyncio
    async def test_create_entry_on_chosen_day_files_it_at_local_noon(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        response = await authenticated_client.post(
            "/api/v1/entries",
            json={"text": "Back-dated", "category_id": category["id"], "date": "2026-01-15"},
            headers=MOSCOW,
        )

        assert response.status_code == 201
        # Noon in Moscow is 09:00 UTC
        assert response.json()["data"]["created_at"] == "2026-01-15T09:00:00"

    @pytest.mark.asyncio
    async def test_create_entry_unknown_category(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.post(
            "/api/v1/entries",
            json={"text": "Orphan", "category_id": str(uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "x" * 5001])
    async def test_create_entry_validation_error(
        self, authenticated_client: AsyncClient, category: dict[str, Any], text: str
    ) -> None:
        response = await authenticated_client.post(
            "/api/v1/entries",
            json={"text": text, "category_id": category["id"]},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_create_entry_on_first_day_east_of_utc(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        response = await authenticated_client.post(
            "/api/v1/entries",
            json={"text": "Too early", "category_id": category["id"], "date": "0001-01-01"},
            headers={"X-Timezone": "Pacific/Kiritimati"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "DATE_OUT_OF_RANGE"

    @pytest.mark.asyncio
    async def test_list_entries_from_first_day_east_of_utc(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.get(
            "/api/v1/entries",
            params={"start": "0001-01-01"},
            headers={"X-Timezone": "Asia/Tokyo"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "DATE_OUT_OF_RANGE"

    @pytest.mark.asyncio
    async def test_list_entries_newest_first_and_filtered(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        for day, text in [("2026-02-01", "first #gym"), ("2026-02-03", "second"), ("2026-02-05", "third #Gym")]:
            await authenticated_client.post(
                "/api/v1/entries",
                json={"text": text, "category_id": category["id"], "date": day},
            )

        response = await authenticated_client.get("/api/v1/entries")
        assert [e["text"] for e in response.json()["data"]] == ["third #Gym", "second", "first #gym"]

        response = await authenticated_client.get("/api/v1/entries", params={"tag": "gym"})
        assert [e["text"] for e in response.json()["data"]] == ["third #Gym", "first #gym"]

        response = await authenticated_client.get(
            "/api/v1/entries", params={"start": "2026-02-02", "end": "2026-02-04"}
        )
        assert [e["text"] for e in response.json()["data"]] == ["second"]

    @pytest.mark.asyncio
    async def test_get_entry(self, authenticated_client: AsyncClient, category: dict[str, Any]) -> None:
        created = await authenticated_client.post(
            "/api/v1/entries", json={"text": "Find me", "category_id": category["id"]}
        )
        entry_id = created.json()["data"]["id"]

        response = await authenticated_client.get(f"/api/v1/entries/{entry_id}")

        assert response.status_code == 200
        assert response.json()["data"]["text"] == "Find me"

    @pytest.mark.asyncio
    async def test_get_entry_not_found(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.get(f"/api/v1/entries/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "ENTRY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_entry_recomputes_tags_and_keeps_timestamp(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        created = await authenticated_client.post(
            "/api/v1/entries",
            json={"text": "Before #old", "category_id": category["id"], "date": "2026-01-10"},
        )
        original = created.json()["data"]

        response = await authenticated_client.put(
            f"/api/v1/entries/{original['id']}",
            json={"text": "After #new", "category_id": category["id"]},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["tags"] == ["#new"]
        assert data["created_at"] == original["created_at"]

    @pytest.mark.asyncio
    async def test_update_entry_moves_to_another_day(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        created = await authenticated_client.post(
            "/api/v1/entries", json={"text": "Move me", "category_id": category["id"]}
        )
        entry_id = created.json()["data"]["id"]

        response = await authenticated_client.put(
            f"/api/v1/entries/{entry_id}",
            json={"text": "Move me", "category_id": category["id"], "date": "2025-12-31"},
        )

        assert response.json()["data"]["created_at"] == "2025-12-31T12:00:00"

    @pytest.mark.asyncio
    async def test_delete_entry(self, authenticated_client: AsyncClient, category: dict[str, Any]) -> None:
        created = await authenticated_client.post(
            "/api/v1/entries", json={"text": "Short-lived", "category_id": category["id"]}
        )
        entry_id = created.json()["data"]["id"]

        response = await authenticated_client.delete(f"/api/v1/entries/{entry_id}")
        assert response.status_code == 204

        response = await authenticated_client.get(f"/api/v1/entries/{entry_id}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_clear_history_keeps_categories(
        self, authenticated_client: AsyncClient, category: dict[str, Any]
    ) -> None:
        for text in ("one", "two"):
            await authenticated_client.post(
                "/api/v1/entries", json={"text": text, "category_id": category["id"]}
            )

        response = await authenticated_client.delete("/api/v1/entries")

        assert response.status_code == 200
        assert response.json()["data"] == {"removed": 2}
        assert (await authenticated_client.get("/api/v1/entries")).json()["data"] == []
        assert len((await authenticated_client.get("/api/v1/categories")).json()["data"]) == 1

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/entries")

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"
