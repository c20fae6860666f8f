"""
Employee Directory Backend - Test Configuration (conftest.py)
=============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── test_settings:   Settings pointing at a fresh SQLite file
    ├── engine:          Async engine with the employee table created
    ├── gateway:         EmployeeGateway over that engine (fail-soft reads)
    ├── strict_gateway:  Same engine, strict reads
    ├── broken_gateway:  Gateway whose employee table has been dropped
    ├── mock_gateway:    AsyncMock standing in for EmployeeGateway
    ├── test_client:     HTTPX AsyncClient, app wired to mock_gateway
    ├── sqlite_client:   HTTPX AsyncClient, app wired to the real gateway
    └── broken_client:   HTTPX AsyncClient, app wired to broken_gateway

The app's lifespan is not run by ASGITransport, so no PostgreSQL is needed;
the gateway dependency is swapped through app.dependency_overrides.
"""

import os

# Environment must be set before app.config is imported
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["FAIL_SOFT_READS"] = "true"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from app.config import Settings
from app.database import Base, create_engine_from_settings
from app.dependencies import get_gateway
from app.models.employee import Employee  # noqa: F401  (registers the table)
from app.schemas.employee import EmployeeResponse
from app.services.employee_gateway import EmployeeGateway


@pytest.fixture
def test_settings(tmp_path):
    """Settings for a throwaway SQLite database under tmp_path."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}",
        db_pool_size=5,
        db_connect_attempts=1,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def engine(test_settings):
    """Async engine with a freshly created employee table."""
    engine = create_engine_from_settings(test_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def gateway(engine):
    return EmployeeGateway(engine, fail_soft_reads=True)


@pytest_asyncio.fixture
async def strict_gateway(engine):
    return EmployeeGateway(engine, fail_soft_reads=False)


@pytest_asyncio.fixture
async def broken_gateway(engine):
    """
    Gateway over a store where every employee statement fails.

    Dropping the table makes SQLite raise OperationalError, which is how a
    lost connection or missing schema looks to the gateway.
    """
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE employee"))
    return EmployeeGateway(engine, fail_soft_reads=True)


@pytest.fixture
def sample_employee():
    """The record used throughout the end-to-end scenarios."""
    return EmployeeResponse(
        id=1,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@x.com",
    )


@pytest.fixture
def mock_gateway():
    """
    An AsyncMock with the EmployeeGateway interface.

    Usage:
        mock_gateway.get_by_id.return_value = sample_employee
        response = await test_client.get("/api/employees/1")
    """
    gateway = AsyncMock(spec=EmployeeGateway)
    gateway.list_all.return_value = []
    gateway.get_by_id.return_value = None
    gateway.ping.return_value = True
    return gateway


async def _client_for(gateway_instance):
    from app.main import app

    app.dependency_overrides[get_gateway] = lambda: gateway_instance
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_gateway, None)


@pytest_asyncio.fixture
async def test_client(mock_gateway):
    """HTTPX AsyncClient talking to the app, backed by mock_gateway."""
    async for client in _client_for(mock_gateway):
        yield client


@pytest_asyncio.fixture
async def sqlite_client(gateway):
    """HTTPX AsyncClient talking to the app, backed by a real SQLite store."""
    async for client in _client_for(gateway):
        yield client


@pytest_asyncio.fixture
async def broken_client(broken_gateway):
    """HTTPX AsyncClient talking to the app, backed by a failing store."""
    async for client in _client_for(broken_gateway):
        yield client
