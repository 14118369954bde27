"""Pydantic schemas for Category API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities.category import ICON_LIBRARY, CategoryColor


def _validate_icon(value: str | None) -> str | None:
    if value is not None and value not in ICON_LIBRARY:
        raise ValueError(f"icon must be one of: {', '.join(ICON_LIBRARY)}")
    return value


class CategoryCreate(BaseModel):
    """Schema for creating a Category."""

    name: str = Field(..., min_length=1, max_length=50)
    icon: str = Field(ICON_LIBRARY[0])
    color: CategoryColor = CategoryColor.BLUE

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, v: str) -> str:
        return _validate_icon(v)  # type: ignore[return-value]


class CategoryUpdate(BaseModel):
    """Schema for updating a Category (all fields optional)."""

    name: str | None = Field(None, min_length=1, max_length=50)
    icon: str | None = None
    color: CategoryColor | None = None

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, v: str | None) -> str | None:
        return _validate_icon(v)


class CategoryResponse(BaseModel):
    """Schema for Category response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "name": "Health",
                "icon": "Heart",
                "color": "red",
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    icon: str
    color: CategoryColor
    created_at: datetime


class CategoryListResponse(BaseModel):
    """Schema for list of Categories."""

    data: list[CategoryResponse]


class CategoryDetailResponse(BaseModel):
    """Schema for single Category."""

    data: CategoryResponse
