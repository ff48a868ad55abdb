from fastapi import HTTPException, Request

from products_api.db import Database
from products_api.repositories.product_repo import ProductRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_product_repo(request: Request) -> ProductRepository:
    return request.app.state.product_repo


def parse_product_id(product_id: str) -> int:
    """
    Path ids must be positive integers ("7", " 7 ", "7.0" are all 7).
    Anything else is a 400, raised before the store is touched.
    """
    try:
        value = float(product_id.strip())
    except ValueError:
        value = None
    if value is None or not value.is_integer() or value <= 0:
        raise HTTPException(status_code=400, detail="Invalid id")
    return int(value)
