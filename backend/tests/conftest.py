"""
Pinboard Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for failure paths and call assertions
    ├── failing_db_session: mock session whose every call raises
    ├── db_session: real AsyncSession on an in-memory SQLite database
    ├── make_board / make_pin: insert rows through db_session
    ├── test_client: HTTPX AsyncClient wired to db_session
    └── failing_client: HTTPX AsyncClient wired to failing_db_session
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.exc import OperationalError  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models.board import Board  # noqa: E402
from app.models.pin import Pin  # noqa: E402


def _db_error(message: str = "Server DB error") -> OperationalError:
    """A driver-level failure as SQLAlchemy would raise it."""
    return OperationalError("SELECT 1", {}, Exception(message))


@pytest.fixture
def db_error():
    """Factory for database errors: `db_error("DB save error")`."""
    return _db_error


# ══════════════════════════════════════════════════════════════════════════
# Sessions
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession (no real DB needed).

    Usage:
        mock_db_session.get.return_value = board
        await board_service.add_pin(mock_db_session, "board1", "pin123")
        mock_db_session.flush.assert_not_awaited()
    """
    session = AsyncMock()
    session.get = AsyncMock(return_value=None)
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def failing_db_session(mock_db_session):
    """Every read and write raises a database error."""
    mock_db_session.get.side_effect = _db_error()
    mock_db_session.execute.side_effect = _db_error()
    mock_db_session.flush.side_effect = _db_error("DB save error")
    return mock_db_session


@pytest_asyncio.fixture
async def db_session():
    """
    A real AsyncSession on a fresh in-memory SQLite database.

    StaticPool keeps the single in-memory connection alive for the whole test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


# ══════════════════════════════════════════════════════════════════════════
# Data Builders
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_pin(db_session):
    async def _make_pin(**overrides) -> Pin:
        fields = {
            "title": "New Pin",
            "description": "New Description",
            "image_url": "new.jpg",
            "user": "user123",
        }
        fields.update(overrides)
        pin = Pin(**fields)
        db_session.add(pin)
        await db_session.commit()
        return pin

    return _make_pin


@pytest.fixture
def make_board(db_session):
    async def _make_board(**overrides) -> Board:
        fields = {
            "title": "Board with Pins",
            "description": None,
            "user": "user123",
            "pins": [],
        }
        fields.update(overrides)
        board = Board(**fields)
        db_session.add(board)
        await db_session.commit()
        return board

    return _make_board


@pytest.fixture
def transient_board():
    """Builds an unsaved Board, the way a mocked session.get would hand it back."""
    def _transient_board(pins, board_id: str = "board1") -> Board:
        now = datetime.now(timezone.utc)
        return Board(
            id=board_id,
            title="Board with Pins",
            user="user123",
            pins=list(pins),
            created_at=now,
            updated_at=now,
        )

    return _transient_board


# ══════════════════════════════════════════════════════════════════════════
# HTTP Clients
# ══════════════════════════════════════════════════════════════════════════

async def _client_for(session):
    app = create_app()

    async def override_session():
        yield session
        await session.commit()

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(db_session):
    """
    HTTPX AsyncClient talking to a fresh app backed by db_session.

    Usage:
        async def test_get_board(test_client):
            response = await test_client.get("/api/boards/board1")
    """
    async with await _client_for(db_session) as client:
        yield client


@pytest_asyncio.fixture
async def failing_client(failing_db_session):
    """HTTPX AsyncClient whose database fails on every call."""
    async with await _client_for(failing_db_session) as client:
        yield client
