"""Report service layer: AI-generated journal summaries."""

from collections.abc import Callable
from datetime import date, datetime, tzinfo
from uuid import UUID

import structlog

from core.exceptions import ReportNotFoundError
from domain.calendar.dates import to_utc_naive
from domain.entities.report import Report, ReportPeriod
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.report_prompt import NO_ENTRIES_CONTENT, build_report_prompt
from infrastructure.ai.provider import GenerationRequest, ITextGenerator

logger = structlog.get_logger()


class ReportService:
    """Service layer for Report business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        generator: ITextGenerator,
        language: str = "Russian",
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._generator = generator
        self._language = language
        self._clock = clock

    async def get_all_for_user(self, user_id: UUID) -> list[Report]:
        """Get all reports for a user, newest first."""
        async with self._uow_factory() as uow:
            return await uow.reports.get_all_for_user(user_id)  # type: ignore[no-any-return]

    async def get_by_id(self, report_id: UUID, user_id: UUID) -> Report:
        """Get a specific report, ensuring ownership."""
        async with self._uow_factory() as uow:
            report = await uow.reports.get(report_id)
            if not report or report.user_id != user_id:
                raise ReportNotFoundError(str(report_id))
            return report

    async def generate(
        self,
        user_id: UUID,
        period: ReportPeriod,
        today: date,
        tz: tzinfo | None = None,
    ) -> Report:
        """Summarize the entries of ``period`` ending today and store the result.

        The model is only called when the period has entries; an empty period
        still yields a stored report saying so. A failed AI call stores nothing.
        """
        local_start, local_end = period.bounds(today)
        start, end = to_utc_naive(local_start, tz), to_utc_naive(local_end, tz)

        async with self._uow_factory() as uow:
            entries = await uow.entries.get_all_for_user(user_id, start=start, end=end)
            categories = await uow.categories.get_all_for_user(user_id)

        if entries:
            prompt = build_report_prompt(entries, categories, period, self._language, tz)
            content = await self._generator.generate(GenerationRequest(prompt=prompt))
        else:
            content = NO_ENTRIES_CONTENT

        report = Report(
            user_id=user_id,
            period=period,
            start_date=start,
            end_date=end,
            content=content,
            generated_at=self._clock(),
        )
        async with self._uow_factory() as uow:
            created = await uow.reports.create(report)
            await uow.commit()

        logger.info(
            "report_generated",
            report_id=str(created.id),
            period=period.value,
            entry_count=len(entries),
        )
        return created

    async def delete(self, report_id: UUID, user_id: UUID) -> bool:
        """Delete a report."""
        async with self._uow_factory() as uow:
            report = await uow.reports.get(report_id)
            if not report or report.user_id != user_id:
                raise ReportNotFoundError(str(report_id))

            deleted = await uow.reports.delete(report_id)
            await uow.commit()
            return deleted  # type: ignore[no-any-return]
