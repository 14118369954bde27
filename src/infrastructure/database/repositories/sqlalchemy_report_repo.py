"""SQLAlchemy implementation of Report repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.report import Report, ReportPeriod
from infrastructure.database.models import ReportModel


class SQLAlchemyReportRepository:
    """SQLAlchemy implementation of IReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Report | None:
        """Get a report by ID."""
        stmt = select(ReportModel).where(ReportModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_user(self, user_id: UUID) -> list[Report]:
        """Get all reports for a user, newest first."""
        stmt = (
            select(ReportModel)
            .where(ReportModel.user_id == user_id)
            .order_by(ReportModel.generated_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, report: Report) -> Report:
        """Store a generated report."""
        model = self._to_model(report)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a report."""
        stmt = select(ReportModel).where(ReportModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: ReportModel) -> Report:
        return Report(
            id=model.id,
            user_id=model.user_id,
            period=ReportPeriod(model.period),
            start_date=model.start_date,
            end_date=model.end_date,
            content=model.content,
            generated_at=model.generated_at,
        )

    def _to_model(self, entity: Report) -> ReportModel:
        return ReportModel(
            id=entity.id,
            user_id=entity.user_id,
            period=entity.period.value,
            start_date=entity.start_date,
            end_date=entity.end_date,
            content=entity.content,
            generated_at=entity.generated_at,
        )
