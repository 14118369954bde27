"""Pydantic schemas for Report API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain.entities.report import ReportPeriod


class ReportCreate(BaseModel):
    """Schema for requesting a new report."""

    period: ReportPeriod


class ReportResponse(BaseModel):
    """Schema for Report response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "789e4567-e89b-12d3-a456-426614174000",
                "period": "Week",
                "start_date": "2026-01-21T00:00:00",
                "end_date": "2026-01-28T23:59:59.999999",
                "content": "## Overview\n...",
                "generated_at": "2026-01-28T21:00:00",
            }
        },
    )

    id: UUID
    period: ReportPeriod
    start_date: datetime
    end_date: datetime
    content: str
    generated_at: datetime


class ReportListResponse(BaseModel):
    """Schema for list of Reports."""

    data: list[ReportResponse]


class ReportDetailResponse(BaseModel):
    """Schema for single Report."""

    data: ReportResponse
