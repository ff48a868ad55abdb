from fastapi import APIRouter, Depends

from products_api.api.deps import get_database
from products_api.db import Database

router = APIRouter()


@router.get("/health", tags=["health"])
def health(database: Database = Depends(get_database)):
    db_ok = database.ping()
    return {
        "status": "ok" if db_ok else "degraded",
        "db": db_ok,
    }
