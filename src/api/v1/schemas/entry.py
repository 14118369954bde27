"""Pydantic schemas for Entry API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EntryWrite(BaseModel):
    """Schema for creating or replacing an Entry.

    ``date`` files the entry at noon of that civil day in the client's
    timezone; without it a new entry is stamped "now" and an edited entry
    keeps its timestamp.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, max_length=5000)
    category_id: UUID
    day: date | None = Field(None, alias="date")


class EntryResponse(BaseModel):
    """Schema for Entry response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "category_id": "456e4567-e89b-12d3-a456-426614174000",
                "text": "Long walk after work #health #evening",
                "tags": ["#health", "#evening"],
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    category_id: UUID
    text: str
    tags: list[str]
    created_at: datetime


class EntryListResponse(BaseModel):
    """Schema for list of Entries."""

    data: list[EntryResponse]


class EntryDetailResponse(BaseModel):
    """Schema for single Entry."""

    data: EntryResponse


class ClearHistoryResult(BaseModel):
    removed: int


class ClearHistoryResponse(BaseModel):
    """Schema for the clear-history result."""

    data: ClearHistoryResult
