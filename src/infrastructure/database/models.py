"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from domain.entities.category import CategoryColor
from domain.entities.report import ReportPeriod

_COLOR_VALUES = ", ".join(f"'{color.value}'" for color in CategoryColor)
_PERIOD_VALUES = ", ".join(f"'{period.value}'" for period in ReportPeriod)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """User profile model (synced from Supabase)."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    display_name: Mapped[str | None] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    categories: Mapped[list["CategoryModel"]] = relationship(
        "CategoryModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    entries: Mapped[list["EntryModel"]] = relationship(
        "EntryModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    reports: Mapped[list["ReportModel"]] = relationship(
        "ReportModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )


class CategoryModel(Base):
    """Entry category model."""

    __tablename__ = "categories"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    icon: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[str] = mapped_column(
        String(20),
        CheckConstraint(f"color IN ({_COLOR_VALUES})", name="ck_categories_color"),
        nullable=False,
        default=CategoryColor.BLUE.value,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    user: Mapped["ProfileModel"] = relationship("ProfileModel", back_populates="categories")
    entries: Mapped[list["EntryModel"]] = relationship(
        "EntryModel",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class EntryModel(Base):
    """Journal entry model."""

    __tablename__ = "entries"
    __table_args__ = (Index("ix_entries_user_created_at", "user_id", "created_at"),)

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    category_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    # Cache of the #tags in text, written from the domain entity
    tags: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user: Mapped["ProfileModel"] = relationship("ProfileModel", back_populates="entries")
    category: Mapped["CategoryModel"] = relationship("CategoryModel", back_populates="entries")


class ReportModel(Base):
    """Generated AI report model."""

    __tablename__ = "reports"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    period: Mapped[str] = mapped_column(
        String(10),
        CheckConstraint(f"period IN ({_PERIOD_VALUES})", name="ck_reports_period"),
        nullable=False,
    )
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    generated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user: Mapped["ProfileModel"] = relationship("ProfileModel", back_populates="reports")
