"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_category_repo import SQLAlchemyCategoryRepository
from infrastructure.database.repositories.sqlalchemy_entry_repo import SQLAlchemyEntryRepository
from infrastructure.database.repositories.sqlalchemy_report_repo import SQLAlchemyReportRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    Repositories handed out by one context share its session, so a category
    delete and the removal of its entries land in the same transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def entries(self) -> SQLAlchemyEntryRepository:
        """Get entry repository."""
        return SQLAlchemyEntryRepository(self._require_session())

    @property
    def categories(self) -> SQLAlchemyCategoryRepository:
        """Get category repository."""
        return SQLAlchemyCategoryRepository(self._require_session())

    @property
    def reports(self) -> SQLAlchemyReportRepository:
        """Get report repository."""
        return SQLAlchemyReportRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
