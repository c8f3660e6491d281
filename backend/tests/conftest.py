"""
Test fixtures for the route planner tests.
"""
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from httpx import AsyncClient, ASGITransport

from tourops.database import Base, get_db
from tourops.main import app
from tourops.models import Account, Client, Hotel, Location, Staff, ThirdParty, Vehicle, VehicleOwner


# Create test database engine (SQLite in-memory)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)


# Enable foreign key constraints for SQLite
@event.listens_for(test_engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def override_get_db(db_session):
    """
    Override the get_db dependency to use the test database session.
    """
    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    return _override_get_db


@pytest.fixture(scope="function")
async def client(override_get_db):
    """
    Create an async test client with the database dependency overridden.
    """
    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def directory(db_session):
    """Reference rows every planner test can point at."""
    manaus = Location(name="Manaus")
    novo_airao = Location(name="Novo Airão")
    anavilhanas = Location(name="Anavilhanas")
    ana = Client(name="Ana Souza")
    bruno = Client(name="Bruno Lima")
    carlos = Staff(name="Carlos Mendes")
    pousada = Hotel(name="Pousada Rio Negro")
    boats = ThirdParty(name="Amazon Boats Ltda")
    jeep = Vehicle(type="car4x4", vehicle_owner=VehicleOwner.COMPANY.value)
    hotel_boat = Vehicle(type="boat", vehicle_owner=VehicleOwner.HOTEL.value, hotel=pousada)
    rented_quad = Vehicle(type="quadbike", vehicle_owner=VehicleOwner.THIRD_PARTY.value, third_party=boats)
    cash = Account(account_holder_name="Tour Ops Cash")
    ana_account = Account(account_holder_name="Ana Souza")

    db_session.add_all([
        manaus, novo_airao, anavilhanas, ana, bruno, carlos, pousada, boats,
        jeep, hotel_boat, rented_quad, cash, ana_account,
    ])
    db_session.commit()

    return SimpleNamespace(
        manaus=manaus.id,
        novo_airao=novo_airao.id,
        anavilhanas=anavilhanas.id,
        ana=ana.id,
        bruno=bruno.id,
        carlos=carlos.id,
        pousada=pousada.id,
        boats=boats.id,
        jeep=jeep.id,
        hotel_boat=hotel_boat.id,
        rented_quad=rented_quad.id,
        cash=cash.id,
        ana_account=ana_account.id,
    )


@pytest.fixture(scope="function")
async def route(client):
    """A draft route starting on 2026-07-01."""
    response = await client.post("/routes", json={"name": "Rio Negro Expedition", "startDate": "2026-07-01"})
    assert response.status_code == 201
    return response.json()
