"""
Fixtures compartidos: base SQLite en memoria, sesión, sedes sembradas y
cliente HTTP con la sesión de prueba inyectada.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database.database import Base, SessionLocal, engine, get_db
from app.modules.locations.models import Location
from app.modules.locations.seed_data import populate_locations


@pytest.fixture
def db_session():
    """Sesión sobre una base recién creada; se descarta al terminar el test"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def locations(db_session):
    """Sedes de la cadena indexadas por código"""
    populate_locations(db_session)
    return {location.code: location for location in db_session.query(Location).all()}


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
