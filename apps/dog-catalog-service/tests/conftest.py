import pytest
from fastapi.testclient import TestClient

from dog_catalog.api.main import create_app
from dog_catalog.db import crud, schemas
from dog_catalog.db.database import Database

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


# Fresh in-memory store per test
@pytest.fixture
def database():
    database = Database(IN_MEMORY_URL)
    database.create_schema()
    try:
        yield database
    finally:
        database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_app(database):
    return create_app(database)


@pytest.fixture
def client(api_app):
    with TestClient(api_app) as c:
        yield c


@pytest.fixture
def dog_factory(db):
    def _create(name: str = "Buddy", breed: str = "Golden Retriever", **fields):
        return crud.create_dog(db, schemas.DogCreate(name=name, breed=breed, **fields))
    return _create
