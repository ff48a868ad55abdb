from typing import Callable, List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from products_api.models.product import Product
from products_api.services.product_validator import ProductValues
from products_api.utils.logs import get_logger

log = get_logger("products.repo")


class ProductStoreError(Exception):
    pass


# sqlite3 raises a bare OverflowError when binding integers beyond 64 bits
STORE_ERRORS = (SQLAlchemyError, OverflowError)


class ProductRepository:
    """
    CRUD over the products table.

    Holds a session factory rather than a session: every call opens its own
    short-lived session and issues a single statement, so one repository
    instance can serve concurrent requests.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def _fail(self, s: Session, op: str, e: Exception):
        s.rollback()
        log.exception(f"{op} failed")
        raise ProductStoreError(f"{op} failed") from e

    def list(self) -> List[Product]:
        with self.session_factory() as s:
            try:
                return s.query(Product).all()
            except STORE_ERRORS as e:
                self._fail(s, "list", e)

    def get(self, product_id: int) -> Optional[Product]:
        with self.session_factory() as s:
            try:
                return s.get(Product, product_id)
            except STORE_ERRORS as e:
                self._fail(s, "get", e)

    def create(self, values: ProductValues) -> Product:
        """Insert a row; the returned Product carries the id the store assigned."""
        with self.session_factory() as s:
            try:
                p = Product(
                    name=values.name,
                    price=values.price,
                    category=values.category,
                    stock=values.stock,
                    description=values.description,
                )
                s.add(p)
                s.commit()
                log.debug(f"create(): id={p.id}")
                return p
            except STORE_ERRORS as e:
                self._fail(s, "create", e)

    def update(self, product_id: int, values: ProductValues) -> Optional[Product]:
        """
        Replace every field of the product. Returns None when no row has that id.
        """
        with self.session_factory() as s:
            try:
                res = s.execute(
                    update(Product)
                    .where(Product.id == product_id)
                    .values(
                        name=values.name,
                        price=values.price,
                        category=values.category,
                        stock=values.stock,
                        description=values.description,
                    )
                    .execution_options(synchronize_session=False)
                )
                s.commit()
                if res.rowcount == 0:
                    return None
                return s.get(Product, product_id)
            except STORE_ERRORS as e:
                self._fail(s, "update", e)

    def delete(self, product_id: int) -> bool:
        with self.session_factory() as s:
            try:
                res = s.execute(
                    delete(Product)
                    .where(Product.id == product_id)
                    .execution_options(synchronize_session=False)
                )
                s.commit()
                return res.rowcount > 0
            except STORE_ERRORS as e:
                self._fail(s, "delete", e)
