"""Calendar API routes.

The browser owns scrolling. It loads the initial window, then asks for one
extension step before its first day or after its last day whenever the
scroll position comes within ``scroll_threshold_px`` of an edge.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.timezone import ClientTimezone, client_today
from api.v1.dependencies import get_calendar_service
from api.v1.schemas.calendar import (
    CalendarMeta,
    CalendarPageResponse,
    CalendarResponse,
    DayCellDetailResponse,
    DayCellResponse,
    DayHeaderResponse,
    EntryCardResponse,
    TextTokenResponse,
    WeekResponse,
)
from core.rate_limit import READ_LIMIT, limiter
from domain.calendar.day_cell import DayCell, EntryCard
from domain.calendar.view import RenderedWeek
from domain.services.calendar_service import CalendarPage, CalendarService

router = APIRouter(prefix="/calendar", tags=["calendar"])

_TODAY_QUERY = Query(None, description="Client's current date; defaults to today in X-Timezone")


@router.get(
    "",
    response_model=CalendarResponse,
    summary="Initial calendar window",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_calendar(
    request: Request,
    user: CurrentUser,
    tz: ClientTimezone,
    service: CalendarService = Depends(get_calendar_service),
    today: date | None = _TODAY_QUERY,
) -> CalendarResponse:
    """
    Get the first window of the infinite calendar.

    The window starts `weeks_back` weeks before the Monday of the current week,
    so the client can scroll `anchor_date` to the top once it has rendered.
    """
    today = today or client_today(tz)
    page = await service.initial(user.id, today, tz)
    return _build_calendar_response(page, service)


@router.get(
    "/past",
    response_model=CalendarResponse,
    summary="Days before the window",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_calendar_past(
    request: Request,
    user: CurrentUser,
    tz: ClientTimezone,
    before: date = Query(..., description="First date the client currently shows"),
    service: CalendarService = Depends(get_calendar_service),
    today: date | None = _TODAY_QUERY,
) -> CalendarResponse:
    """Get the extension step ending the day before `before`, to prepend."""
    page = await service.past(user.id, before, today or client_today(tz), tz)
    return _build_calendar_response(page, service)


@router.get(
    "/future",
    response_model=CalendarResponse,
    summary="Days after the window",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_calendar_future(
    request: Request,
    user: CurrentUser,
    tz: ClientTimezone,
    after: date = Query(..., description="Last date the client currently shows"),
    service: CalendarService = Depends(get_calendar_service),
    today: date | None = _TODAY_QUERY,
) -> CalendarResponse:
    """Get the extension step starting the day after `after`, to append."""
    page = await service.future(user.id, after, today or client_today(tz), tz)
    return _build_calendar_response(page, service)


@router.get(
    "/days/{day}",
    response_model=DayCellDetailResponse,
    summary="A single calendar day",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_calendar_day(
    request: Request,
    day: date,
    user: CurrentUser,
    tz: ClientTimezone,
    service: CalendarService = Depends(get_calendar_service),
    today: date | None = _TODAY_QUERY,
) -> DayCellDetailResponse:
    """Re-render one day, e.g. after an entry on it was edited."""
    cell = await service.day(user.id, day, today or client_today(tz), tz)
    return DayCellDetailResponse(data=_build_cell_response(cell))


def _build_calendar_response(page: CalendarPage, service: CalendarService) -> CalendarResponse:
    config = service.config
    return CalendarResponse(
        data=CalendarPageResponse(
            today=page.today,
            start=page.start,
            end=page.end,
            weeks=[_build_week_response(week) for week in page.weeks],
        ),
        meta=CalendarMeta(
            anchor_date=page.today,
            extension_days=config.extension_days,
            scroll_threshold_px=config.scroll_threshold_px,
            anchor_offset_px=config.anchor_offset_px,
            initial_scroll_delay_ms=config.initial_scroll_delay_ms,
        ),
    )


def _build_week_response(rendered: RenderedWeek) -> WeekResponse:
    return WeekResponse(
        start=rendered.week.start,
        end=rendered.week.end,
        days=[_build_cell_response(cell) for cell in rendered.cells],
    )


def _build_cell_response(cell: DayCell) -> DayCellResponse:
    header = cell.header
    return DayCellResponse(
        day=cell.day,
        header=DayHeaderResponse(
            weekday=header.weekday,
            day=header.day,
            month=header.month,
            year=header.year,
            title=header.title,
            is_today=header.is_today,
        ),
        is_empty=cell.is_empty,
        entries=[_build_card_response(card) for card in cell.cards],
    )


def _build_card_response(card: EntryCard) -> EntryCardResponse:
    return EntryCardResponse(
        entry_id=card.entry.id,
        category_id=card.entry.category_id,
        category_name=card.category_name,
        icon=card.icon,
        color=card.color,
        text=card.entry.text,
        tags=list(card.entry.tags),
        tokens=[TextTokenResponse(text=t.text, is_tag=t.is_tag) for t in card.tokens],
        created_at=card.entry.created_at,
    )
