"""
Pinboard Backend — Database Session Management
================================================

What:  The async engine, the session factory, the declarative Base and the
       per-request session dependency.
How:   One engine per process, built from settings.database_url. Each request
       gets its own AsyncSession; the services only flush, and the dependency
       owns the commit/rollback decision.
Who:   Routes receive sessions through Depends(get_db_session); models inherit
       Base; Alembic reads Base.metadata.

Pooling:
    PostgreSQL (asyncpg) uses a QueuePool sized from settings
    (db_pool_size + db_max_overflow connections at most), pre-pings
    connections and recycles them hourly.
    SQLite URLs (local runs, tests) get the dialect's default pool instead,
    since the pool arguments do not apply there.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

POOL_RECYCLE_SECONDS = 3600


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=POOL_RECYCLE_SECONDS,
        )
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# Services build response models from ORM objects after the flush, so loaded
# attributes must survive the commit.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base shared by Pin and Board."""


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session for the lifetime of a request.

    The request's writes are committed together once the route returns.
    Any exception (a DatabaseError from a service included) rolls the
    transaction back before it propagates to the exception handlers.

    Usage:
        @router.get("/{board_id}")
        async def get_board(board_id: str, db: AsyncSession = Depends(get_db_session)):
            return await board_service.get_board(db, board_id)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await engine.dispose()
