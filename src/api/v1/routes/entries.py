"""Entry API routes."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentUser
from api.dependencies.timezone import ClientTimezone
from api.v1.dependencies import get_entry_service
from api.v1.schemas.entry import (
    ClearHistoryResponse,
    ClearHistoryResult,
    EntryDetailResponse,
    EntryListResponse,
    EntryResponse,
    EntryWrite,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.entry import Entry
from domain.services.entry_service import EntryService

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get(
    "",
    response_model=EntryListResponse,
    summary="List journal entries",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_entries(
    request: Request,
    user: CurrentUser,
    tz: ClientTimezone,
    service: EntryService = Depends(get_entry_service),
    tag: str | None = Query(None, max_length=100, description="Only entries carrying this #tag"),
    start: date | None = Query(None, description="First civil date to include"),
    end: date | None = Query(None, description="Last civil date to include"),
) -> EntryListResponse:
    """
    Get the user's entries, newest first.

    `start` and `end` are calendar dates in the client's timezone (`X-Timezone`).
    The tag filter is case-insensitive and accepts the tag with or without `#`.
    """
    entries = await service.get_all_for_user(user.id, tag=tag, start=start, end=end, tz=tz)
    return EntryListResponse(data=[_build_entry_response(entry) for entry in entries])


@router.get(
    "/{entry_id}",
    response_model=EntryDetailResponse,
    summary="Get an entry",
    responses={404: {"description": "Entry not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_entry(
    request: Request,
    entry_id: UUID,
    user: CurrentUser,
    service: EntryService = Depends(get_entry_service),
) -> EntryDetailResponse:
    """Get a single entry."""
    entry = await service.get_by_id(entry_id, user.id)
    return EntryDetailResponse(data=_build_entry_response(entry))


@router.post(
    "",
    response_model=EntryDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an entry",
    responses={
        201: {"description": "Entry created successfully"},
        404: {"description": "Category not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_entry(
    request: Request,
    body: EntryWrite,
    user: CurrentUser,
    tz: ClientTimezone,
    service: EntryService = Depends(get_entry_service),
) -> EntryDetailResponse:
    """Create an entry. Tags are extracted from the text."""
    entry = await service.create(
        user_id=user.id,
        text=body.text,
        category_id=body.category_id,
        day=body.day,
        tz=tz,
    )
    return EntryDetailResponse(data=_build_entry_response(entry))


@router.put(
    "/{entry_id}",
    response_model=EntryDetailResponse,
    summary="Replace an entry",
    responses={
        200: {"description": "Entry updated successfully"},
        404: {"description": "Entry or category not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_entry(
    request: Request,
    entry_id: UUID,
    body: EntryWrite,
    user: CurrentUser,
    tz: ClientTimezone,
    service: EntryService = Depends(get_entry_service),
) -> EntryDetailResponse:
    """Replace an entry's text and category, and optionally move it to another day."""
    entry = await service.update(
        entry_id=entry_id,
        user_id=user.id,
        text=body.text,
        category_id=body.category_id,
        day=body.day,
        tz=tz,
    )
    return EntryDetailResponse(data=_build_entry_response(entry))


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an entry",
    responses={
        204: {"description": "Entry deleted successfully"},
        404: {"description": "Entry not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_entry(
    request: Request,
    entry_id: UUID,
    user: CurrentUser,
    service: EntryService = Depends(get_entry_service),
) -> None:
    """Delete an entry."""
    await service.delete(entry_id, user.id)
    return None


@router.delete(
    "",
    response_model=ClearHistoryResponse,
    summary="Clear journal history",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def clear_history(
    request: Request,
    user: CurrentUser,
    service: EntryService = Depends(get_entry_service),
) -> ClearHistoryResponse:
    """Delete every entry of the user. Categories and reports are kept."""
    removed = await service.clear_history(user.id)
    return ClearHistoryResponse(data=ClearHistoryResult(removed=removed))


def _build_entry_response(entry: Entry) -> EntryResponse:
    return EntryResponse(
        id=entry.id,
        category_id=entry.category_id,
        text=entry.text,
        tags=list(entry.tags),
        created_at=entry.created_at,
    )
