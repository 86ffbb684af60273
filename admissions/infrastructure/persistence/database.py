"""SQLAlchemy declarative base, shared column helpers and engine setup."""

from datetime import datetime
from enum import Enum

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import DateTime, MetaData, func
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from admissions.infrastructure.config.settings import Settings

# Deterministic constraint names so migrations diff cleanly
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
    # Every datetime column is timezone-aware (timestamptz on PostgreSQL).
    type_annotation_map = {datetime: DateTime(timezone=True)}


class TimestampMixin:
    """``created_at``/``updated_at`` filled in by the database."""

    created_at: Mapped[datetime] = mapped_column(insert_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(), onupdate=func.now(), nullable=False
    )


def enum_type(enum_cls: type[Enum]) -> SQLEnum:
    """Store an enum by its value in a plain string column."""
    return SQLEnum(
        enum_cls,
        native_enum=False,
        length=64,
        values_callable=lambda members: [member.value for member in members],
    )


def create_database_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are built from rows before commit; keep them readable afterwards
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
