"""Report repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.report import Report


class IReportRepository(Protocol):
    """Repository interface for Report entities."""

    async def get(self, id: UUID) -> Report | None:
        """Get a report by ID."""
        ...

    async def get_all_for_user(self, user_id: UUID) -> list[Report]:
        """Get all reports for a user, newest first."""
        ...

    async def create(self, report: Report) -> Report:
        """Store a generated report."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a report and return success status."""
        ...
