"""AI relay routes."""

import structlog
from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_text_generator
from api.v1.schemas.ai import GenerateRequest, GenerateResponse
from core.rate_limit import AI_LIMIT, limiter
from infrastructure.ai.provider import GenerationRequest, ITextGenerator

router = APIRouter(prefix="/ai", tags=["ai"])
logger = structlog.get_logger()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Relay a prompt to the generative model",
    responses={
        429: {"description": "AI quota exceeded"},
        502: {"description": "AI service failed or returned no text"},
        503: {"description": "AI relay not configured"},
    },
)
@limiter.limit(AI_LIMIT)  # type: ignore[untyped-decorator]
async def generate(
    request: Request,
    body: GenerateRequest,
    user: CurrentUser,
    generator: ITextGenerator = Depends(get_text_generator),
) -> GenerateResponse:
    """
    Forward a prompt to Gemini and return the answer text.

    The API key never leaves the server. `model`, `temperature` and `top_p`
    fall back to the configured defaults.
    """
    logger.info("ai_generate_requested", prompt_chars=len(body.prompt))
    text = await generator.generate(
        GenerationRequest(
            prompt=body.prompt,
            model=body.model,
            temperature=body.temperature,
            top_p=body.top_p,
        )
    )
    return GenerateResponse(text=text)
