"""Report API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.dependencies.timezone import ClientTimezone, client_today
from api.v1.dependencies import get_report_service
from api.v1.schemas.report import (
    ReportCreate,
    ReportDetailResponse,
    ReportListResponse,
    ReportResponse,
)
from core.rate_limit import AI_LIMIT, READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get(
    "",
    response_model=ReportListResponse,
    summary="List reports",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_reports(
    request: Request,
    user: CurrentUser,
    service: ReportService = Depends(get_report_service),
) -> ReportListResponse:
    """Get the user's stored reports, newest first."""
    reports = await service.get_all_for_user(user.id)
    return ReportListResponse(data=[ReportResponse.model_validate(report) for report in reports])


@router.get(
    "/{report_id}",
    response_model=ReportDetailResponse,
    summary="Get a report",
    responses={404: {"description": "Report not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_report(
    request: Request,
    report_id: UUID,
    user: CurrentUser,
    service: ReportService = Depends(get_report_service),
) -> ReportDetailResponse:
    """Get a single report."""
    report = await service.get_by_id(report_id, user.id)
    return ReportDetailResponse(data=ReportResponse.model_validate(report))


@router.post(
    "",
    response_model=ReportDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a report",
    responses={
        201: {"description": "Report generated and stored"},
        429: {"description": "AI quota exceeded"},
        502: {"description": "AI service failed"},
        503: {"description": "AI relay not configured"},
    },
)
@limiter.limit(AI_LIMIT)  # type: ignore[untyped-decorator]
async def generate_report(
    request: Request,
    body: ReportCreate,
    user: CurrentUser,
    tz: ClientTimezone,
    service: ReportService = Depends(get_report_service),
) -> ReportDetailResponse:
    """
    Summarize the day, the last week or the last month of entries with AI.

    The period ends today in the client's timezone. An empty period is stored
    as a short "no entries" report without calling the model.
    """
    report = await service.generate(
        user_id=user.id,
        period=body.period,
        today=client_today(tz),
        tz=tz,
    )
    return ReportDetailResponse(data=ReportResponse.model_validate(report))


@router.delete(
    "/{report_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a report",
    responses={
        204: {"description": "Report deleted successfully"},
        404: {"description": "Report not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_report(
    request: Request,
    report_id: UUID,
    user: CurrentUser,
    service: ReportService = Depends(get_report_service),
) -> None:
    """Delete a stored report."""
    await service.delete(report_id, user.id)
    return None
