"""Pydantic schemas for the calendar view."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field


class TextTokenResponse(BaseModel):
    text: str
    is_tag: bool


class DayHeaderResponse(BaseModel):
    weekday: str
    day: int
    month: str
    year: int
    title: str
    is_today: bool


class EntryCardResponse(BaseModel):
    """An entry as it appears inside a day cell."""

    entry_id: UUID
    category_id: UUID
    category_name: str | None
    icon: str
    color: str
    text: str
    tags: list[str]
    tokens: list[TextTokenResponse]
    created_at: datetime


class DayCellResponse(BaseModel):
    day: date = Field(..., serialization_alias="date")
    header: DayHeaderResponse
    is_empty: bool
    entries: list[EntryCardResponse]


class WeekResponse(BaseModel):
    start: date
    end: date
    days: list[DayCellResponse]


class CalendarPageResponse(BaseModel):
    today: date
    start: date
    end: date
    weeks: list[WeekResponse]


class CalendarMeta(BaseModel):
    """Client-side scrolling constants for the infinite calendar."""

    anchor_date: date
    extension_days: int
    scroll_threshold_px: int
    anchor_offset_px: int
    initial_scroll_delay_ms: int


class CalendarResponse(BaseModel):
    """Schema for a window of calendar weeks."""

    data: CalendarPageResponse
    meta: CalendarMeta


class DayCellDetailResponse(BaseModel):
    """Schema for a single calendar day."""

    data: DayCellResponse
