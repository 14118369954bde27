"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.calendar.config import CalendarConfig
from domain.services.calendar_service import CalendarService
from domain.services.category_service import CategoryService
from domain.services.entry_service import EntryService
from domain.services.report_service import ReportService
from infrastructure.ai.gemini_provider import GeminiProvider
from infrastructure.ai.provider import ITextGenerator
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_calendar_config() -> CalendarConfig:
    """Calendar constants, validated once at first use."""
    return CalendarConfig.from_settings(settings)


@lru_cache
def get_text_generator() -> ITextGenerator:
    """Get the generative model relay."""
    return GeminiProvider()


@lru_cache
def get_entry_service() -> EntryService:
    """Get Entry service instance."""
    return EntryService(get_uow_factory())


@lru_cache
def get_category_service() -> CategoryService:
    """Get Category service instance."""
    return CategoryService(get_uow_factory())


@lru_cache
def get_report_service() -> ReportService:
    """Get Report service instance."""
    return ReportService(
        get_uow_factory(),
        generator=get_text_generator(),
        language=settings.report_language,
    )


@lru_cache
def get_calendar_service() -> CalendarService:
    """Get Calendar service instance."""
    return CalendarService(get_uow_factory(), config=get_calendar_config())
