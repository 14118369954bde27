"""Pydantic schemas for the AI relay."""

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Prompt relayed to the generative model; omitted options use server defaults."""

    prompt: str = Field(..., min_length=1, max_length=100_000)
    model: str | None = Field(None, min_length=1, max_length=100, pattern=r"^[A-Za-z0-9._-]+$")
    temperature: float | None = Field(None, ge=0.0, le=2.0)
    top_p: float | None = Field(None, ge=0.0, le=1.0)


class GenerateResponse(BaseModel):
    """Relay result, shaped like the upstream proxy clients already call."""

    text: str
