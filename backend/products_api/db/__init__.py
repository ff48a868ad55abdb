from typing import Optional

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from products_api.utils.logs import get_logger

Base = declarative_base()

log = get_logger("products.db")

DESCRIPTION_COLUMN_DDL = "ALTER TABLE products ADD COLUMN description TEXT DEFAULT ''"


class SchemaMigrationError(Exception):
    pass


def ensure_description_column(engine: Engine) -> bool:
    """
    Add products.description when an older table lacks it.

    Returns True if the column was added, False if it was already there.
    Safe to call any number of times.
    """
    columns = {c["name"] for c in inspect(engine).get_columns("products")}
    if "description" in columns:
        return False
    with engine.begin() as conn:
        conn.execute(text(DESCRIPTION_COLUMN_DDL))
    log.info("Added missing products.description column")
    return True


class Database:
    """
    Owns the engine and session factory for one store.

    Constructed once at startup; dispose() releases the pooled connections.
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {}
        if url.startswith("sqlite"):
            # handlers run in the threadpool, each with its own session
            connect_args["check_same_thread"] = False
        self.url = url
        self.engine = create_engine(url, future=True, echo=echo, connect_args=connect_args)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    def init_schema(self) -> None:
        """
        Create the products table if absent, then make sure the description column exists.
        Raises SchemaMigrationError on any store failure.
        """
        # populate metadata
        import products_api.models.product  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
            ensure_description_column(self.engine)
        except SQLAlchemyError as e:
            log.exception("Error running migration")
            raise SchemaMigrationError(str(e)) from e
        log.info("Migration OK (description column ready)")

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            log.warning("Store ping failed", exc_info=True)
            return False

    def file_path(self) -> Optional[str]:
        """Filesystem path of a file-backed SQLite store, else None."""
        url = self.engine.url
        if url.get_backend_name() != "sqlite":
            return None
        if not url.database or url.database == ":memory:":
            return None
        return url.database

    def dispose(self) -> None:
        self.engine.dispose()
