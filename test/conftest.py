"""
Test Configuration and Fixtures

This module provides:
- A per-worker SQLite database (pytest-xdist friendly)
- Database cleanup for every non-unit test
- A session-scoped TestClient running the real application lifespan

Architecture:
- Unit tests (marked `unit`): pure mocks, no database cleanup
- Integration tests: real database through SQLAlchemy + aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read the environment at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any application module is imported."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')

    test_db_dir = Path(tempfile.gettempdir()) / 'desk_booker_test'
    test_db_dir.mkdir(exist_ok=True)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_dir / f"test_{worker_id}.db"}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.database.db_setting import Base  # noqa: E402
from src.service.desk_booking.driven_adapter.model import (  # noqa: E402
    DeskBookingModel,
    DeskModel,
)


def _get_test_database_url() -> str:
    return os.environ['DATABASE_URL']


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    asyncio.run(_setup_test_database())


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')  # type: ignore[attr-defined]


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    engine = create_async_engine(_get_test_database_url())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


@pytest.fixture
async def clean_database() -> AsyncGenerator[None, None]:
    engine = create_async_engine(_get_test_database_url())
    async with engine.begin() as conn:
        # Children first, desk_booking references desk
        await conn.execute(delete(DeskBookingModel))
        await conn.execute(delete(DeskModel))
    await engine.dispose()
    yield


# =============================================================================
# HTTP Client
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client
