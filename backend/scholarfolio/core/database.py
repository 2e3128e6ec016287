import logging
import ssl
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy import JSON
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from scholarfolio.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    def to_dict(self) -> dict[str, Any]:
        """Column values keyed by column name. Null JSON list columns come back as []."""
        row = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if value is None and isinstance(column.type, JSON):
                value = []
            row[column.key] = value
        return row


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the application's pooled async engine."""
    if settings.is_sqlite:
        return create_async_engine(settings.database_url, echo=False)

    connect_args = {}
    if settings.database_ssl_insecure:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = context

    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> bool:
    """Create all tables in one transaction. Returns False when initialization failed."""
    # Register every model on Base.metadata
    from scholarfolio import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError):
        logger.exception("Error initializing database")
        return False
    logger.info("Database tables initialized successfully")
    return True


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the session factory held on app.state."""
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
