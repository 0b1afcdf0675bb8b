"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Adaptadores in-memory con reloj fijo y UUIDs deterministas
- Casos de uso cableados igual que en la API
- Base de datos SQLite in-memory para los repos SQL
- Cliente HTTP de prueba (httpx AsyncClient + ASGITransport)
"""

import uuid
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.api.dependencies import build_use_cases, get_use_cases
from reservation_engine.application.dtos.reservation_dto import CreateReservationCommand
from reservation_engine.application.interfaces.clock import FakeClock
from reservation_engine.application.interfaces.uuid_generator import FakeUUIDGenerator
from reservation_engine.config import Settings
from reservation_engine.infrastructure.db.engine import (
    build_engine,
    build_sessionmaker,
    create_schema,
)
from reservation_engine.infrastructure.in_memory import (
    InMemoryCommissionRepo,
    InMemoryCustomerRepo,
    InMemoryLedgerRepo,
    InMemoryReservationRepo,
    InMemoryResourceCatalog,
    InMemoryTransactionManager,
)
from reservation_engine.main import app
from tests.factories import NOW, RESOURCE_A_ID, make_resources, make_users, seed_database

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"

# ============================================================================
# FIXTURES IN-MEMORY
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    return Settings(use_in_memory=True, database_url=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def adapters(clock: FakeClock) -> dict[str, Any]:
    reservation_repo = InMemoryReservationRepo()
    return {
        "reservation_repo": reservation_repo,
        "commission_repo": InMemoryCommissionRepo(reservation_repo),
        "ledger_repo": InMemoryLedgerRepo(reservation_repo),
        "resource_catalog": InMemoryResourceCatalog(make_resources()),
        "customer_repo": InMemoryCustomerRepo(make_users()),
        "tx_manager": InMemoryTransactionManager(),
        "clock": clock,
        "uuid_generator": FakeUUIDGenerator(),
    }


@pytest.fixture
def use_cases(settings: Settings, adapters: dict[str, Any]) -> dict[str, Any]:
    return build_use_cases(settings=settings, **adapters)


@pytest.fixture
def make_command():
    """Fábrica de comandos de creación con valores válidos por defecto."""

    def _make(**overrides: Any) -> CreateReservationCommand:
        values: dict[str, Any] = {
            "customer_name": "Carla Cliente",
            "customer_email": "Carla@Example.com",
            "resource_ids": [RESOURCE_A_ID],
            "check_in": "2026-02-01",
            "check_out": "2026-02-03",
            "guests": 2,
            "agent_id": None,
        }
        values.update(overrides)
        return CreateReservationCommand(**values)

    return _make


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """SQLite in-memory con una sola conexión compartida."""
    engine = build_engine(Settings(use_in_memory=False, database_url=SQLITE_MEMORY_URL))
    await create_schema(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    async with build_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def file_engine(tmp_path):
    """SQLite en archivo: cada sesión usa su propia conexión, como en producción."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'reservations.db'}"
    engine = build_engine(Settings(use_in_memory=False, database_url=url))
    await create_schema(engine)
    async with build_sessionmaker(engine)() as session:
        await seed_database(session)

    yield engine

    await engine.dispose()


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================


@pytest_asyncio.fixture
async def client(use_cases: dict[str, Any]) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP con los casos de uso de prueba inyectados."""
    app.dependency_overrides[get_use_cases] = lambda: use_cases

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def unique_email() -> str:
    return f"test_{uuid.uuid4().hex[:12]}@example.com"


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "concurrency: Tests de reservas simultáneas sobre el mismo recurso",
    )
