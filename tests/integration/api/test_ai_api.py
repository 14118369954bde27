"""Integration tests for the AI relay endpoint."""

import pytest
from httpx import AsyncClient

from tests.conftest import FakeTextGenerator


class TestAIRelayAPI:
    """Integration tests for POST /api/v1/ai/generate."""

    @pytest.mark.asyncio
    async def test_generate_relays_prompt(
        self, authenticated_client: AsyncClient, text_generator: FakeTextGenerator
    ) -> None:
        response = await authenticated_client.post(
            "/api/v1/ai/generate",
            json={"prompt": "Summarize my week", "temperature": 0.2},
        )

        assert response.status_code == 200
        assert response.json() == {"text": text_generator.text}
        request = text_generator.requests[0]
        assert request.prompt == "Summarize my week"
        assert request.temperature == 0.2
        assert request.model is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"prompt": ""},
            {"prompt": "hi", "temperature": 2.5},
            {"prompt": "hi", "top_p": -0.1},
            {"prompt": "hi", "model": "../../etc"},
        ],
    )
    async def test_generate_validation_error(
        self, authenticated_client: AsyncClient, body: dict[str, object]
    ) -> None:
        response = await authenticated_client.post("/api/v1/ai/generate", json=body)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_generate_requires_authentication(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/ai/generate", json={"prompt": "hi"})

        assert response.status_code == 401
