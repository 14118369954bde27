"""Google Gemini relay over the REST ``generateContent`` endpoint.

Request body::

    {
        "contents": [{"parts": [{"text": "<prompt>"}]}],
        "generationConfig": {"temperature": 0.7, "topP": 0.95}
    }

The answer text is read from ``candidates[0].content.parts[0].text``.
"""

from typing import Any

import httpx
import structlog

from core.config import settings
from core.exceptions import (
    AIEmptyResponseError,
    AINotConfiguredError,
    AIQuotaExceededError,
    AIServiceError,
)
from infrastructure.ai.provider import GenerationRequest

logger = structlog.get_logger()


def extract_text(payload: dict[str, Any]) -> str:
    """Pull the first candidate's text out of a generateContent response."""
    try:
        return str(payload["candidates"][0]["content"]["parts"][0]["text"] or "")
    except (KeyError, IndexError, TypeError):
        return ""


def _upstream_message(response: httpx.Response) -> str:
    try:
        error = response.json().get("error")
    except ValueError:
        error = None
    if isinstance(error, dict):
        return str(error.get("message") or error)
    if error:
        return str(error)
    return f"HTTP {response.status_code}: {response.reason_phrase}"


class GeminiProvider:
    """Generates report text with Gemini.

    The HTTP client is created per call unless one is injected, which keeps
    the provider safe to share between requests and easy to test with
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: str = settings.gemini_api_key,
        model: str = settings.gemini_model,
        base_url: str = settings.gemini_base_url,
        temperature: float = settings.gemini_temperature,
        top_p: float = settings.gemini_top_p,
        timeout: float = settings.gemini_timeout_seconds,
        proxy_url: str = settings.gemini_proxy_url,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._temperature = temperature
        self._top_p = top_p
        self._timeout = timeout
        self._proxy_url = proxy_url or None
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _endpoint(self, model: str) -> str:
        return f"{self._base_url}/v1beta/models/{model}:generateContent"

    async def generate(self, request: GenerationRequest) -> str:
        """Send ``request.prompt`` to Gemini and return the answer text."""
        if not self._api_key:
            raise AINotConfiguredError()

        model = request.model or self._model
        body = {
            "contents": [{"parts": [{"text": request.prompt}]}],
            "generationConfig": {
                "temperature": self._temperature if request.temperature is None else request.temperature,
                "topP": self._top_p if request.top_p is None else request.top_p,
            },
        }

        logger.info("ai_relay_request", model=model, prompt_length=len(request.prompt))
        try:
            response = await self._post(model, body)
        except httpx.HTTPError as e:
            logger.error("ai_relay_failed", model=model, error=str(e))
            raise AIServiceError(f"Gemini API is unreachable: {e}") from e

        if response.status_code == 429:
            logger.warning("ai_relay_quota_exceeded", model=model)
            raise AIQuotaExceededError()
        if response.is_error:
            message = _upstream_message(response)
            logger.error(
                "ai_relay_failed",
                model=model,
                status_code=response.status_code,
                error=message,
            )
            raise AIServiceError(message, upstream_status=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("ai_relay_invalid_response", model=model, status_code=response.status_code)
            raise AIServiceError(
                "Gemini API returned a non-JSON response", upstream_status=response.status_code
            ) from e

        text = extract_text(payload).strip()
        if not text:
            logger.error("ai_relay_empty_response", model=model)
            raise AIEmptyResponseError()

        logger.info("ai_relay_completed", model=model, text_length=len(text))
        return text

    async def _post(self, model: str, body: dict[str, Any]) -> httpx.Response:
        params = {"key": self._api_key}
        if self._client is not None:
            return await self._client.post(self._endpoint(model), params=params, json=body)
        async with httpx.AsyncClient(timeout=self._timeout, proxy=self._proxy_url) as client:
            return await client.post(self._endpoint(model), params=params, json=body)
