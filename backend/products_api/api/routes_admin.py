import os

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from products_api.api.deps import get_database
from products_api.db import Database

router = APIRouter(tags=["admin"])


@router.get("/db", summary="Download the raw SQLite store")
def download_db(database: Database = Depends(get_database)):
    path = database.file_path()
    if not path or not os.path.exists(path):
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(
        path,
        media_type="application/x-sqlite3",
        headers={"Content-Disposition": 'inline; filename="products.db"'},
    )
