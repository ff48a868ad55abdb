import logging

import pytest
from fastapi.testclient import TestClient

from products_api.config import Settings
from products_api.db import SchemaMigrationError
from products_api.main import create_app


def test_startup_fails_on_unreachable_store(tmp_path):
    settings = Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'missing' / 'dir' / 'products.db'}",
        STATIC_DIR=str(tmp_path / "no-frontend"),
    )
    app = create_app(settings)
    with pytest.raises(SchemaMigrationError):
        with TestClient(app):
            pass
    assert not hasattr(app.state, "product_repo")


def test_log_level_follows_app_settings(tmp_path):
    try:
        create_app(Settings(LOG_LEVEL="debug", STATIC_DIR=str(tmp_path)))
        assert logging.getLogger("products.repo").level == logging.DEBUG
        assert logging.getLogger("products.db").level == logging.DEBUG

        create_app(Settings(LOG_LEVEL="WARNING", STATIC_DIR=str(tmp_path)))
        assert logging.getLogger("products.api").level == logging.WARNING
    finally:
        create_app(Settings(LOG_LEVEL="INFO", STATIC_DIR=str(tmp_path)))
