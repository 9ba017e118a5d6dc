"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from freight.app.main import app
from freight.app.db.session import get_db, Base

# In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints for SQLite."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", set_sqlite_pragma)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def client(session_factory):
    """Async client for testing, bound to the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides = {}


@pytest.fixture
async def fleet(client):
    """Register two drivers, two trucks, three cargos and one route."""
    ids = {"drivers": [], "trucks": [], "cargos": [], "routes": []}

    for surname, license_number in (("Ivanov", "AB-1001"), ("Petrova", "AB-1002")):
        response = await client.post("/v1/drivers", json={
            "surname": surname,
            "name": "Alex",
            "phone_number": "79990001122",
            "license_number": license_number
        })
        assert response.status_code == 201
        ids["drivers"].append(response.json()["id"])

    for plate in ("A123BC", "B456DE"):
        response = await client.post("/v1/trucks", json={
            "brand": "Volvo",
            "model": "FH16",
            "year": 2019,
            "capacity_tons": 20,
            "plate_number": plate
        })
        assert response.status_code == 201
        ids["trucks"].append(response.json()["id"])

    for i in range(3):
        response = await client.post("/v1/cargos", json={
            "description": f"Pallets #{i}",
            "weight_tons": 5.5,
            "sender": "Acme",
            "receiver": "Globex",
            "cargo_type": "SOLID"
        })
        assert response.status_code == 201
        ids["cargos"].append(response.json()["id"])

    response = await client.post("/v1/routes", json={"origin": "Moscow", "destination": "Kazan"})
    assert response.status_code == 201
    ids["routes"].append(response.json()["id"])

    return ids
