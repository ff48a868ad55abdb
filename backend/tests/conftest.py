import pytest
from fastapi.testclient import TestClient

from products_api.config import Settings
from products_api.db import Database
from products_api.main import create_app
from products_api.repositories.product_repo import ProductRepository


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'products.db'}"


@pytest.fixture
def database(db_url):
    db = Database(db_url)
    db.init_schema()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def repo(database):
    return ProductRepository(database.SessionLocal)


@pytest.fixture
def client(db_url, tmp_path):
    settings = Settings(DATABASE_URL=db_url, STATIC_DIR=str(tmp_path / "no-frontend"))
    # entering the client runs the lifespan (schema + repository)
    with TestClient(create_app(settings)) as c:
        yield c
