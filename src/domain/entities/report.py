"""Report domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import StrEnum
from uuid import UUID, uuid4


class ReportPeriod(StrEnum):
    """Span of journal history a report covers."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"

    @property
    def days_back(self) -> int:
        return {ReportPeriod.DAY: 0, ReportPeriod.WEEK: 7, ReportPeriod.MONTH: 30}[self]

    @property
    def adjective(self) -> str:
        return {
            ReportPeriod.DAY: "daily",
            ReportPeriod.WEEK: "weekly",
            ReportPeriod.MONTH: "monthly",
        }[self]

    def bounds(self, today: date) -> tuple[datetime, datetime]:
        """Return the naive local ``[start, end]`` covered when generated on ``today``."""
        start = datetime.combine(today - timedelta(days=self.days_back), time.min)
        end = datetime.combine(today, time.max)
        return start, end


@dataclass(frozen=True)
class Report:
    """Domain entity for a generated report. Immutable once created."""

    user_id: UUID
    period: ReportPeriod
    start_date: datetime
    end_date: datetime
    content: str
    id: UUID = field(default_factory=uuid4)
    generated_at: datetime = field(default_factory=datetime.utcnow)
