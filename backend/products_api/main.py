import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api import __version__
from products_api.api.health import router as health_router
from products_api.api.routes_admin import router as admin_router
from products_api.api.routes_products import router as products_router
from products_api.config import Settings, settings as default_settings
from products_api.db import Database
from products_api.repositories.product_repo import ProductRepository
from products_api.utils.logs import get_logger, set_log_level

log = get_logger("products.api")


def _format_validation_error(err: dict) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    msg = err.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    set_log_level(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # startup: a failed migration aborts startup, the server never serves an unknown schema
        database = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
        try:
            database.init_schema()
        except Exception:
            database.dispose()
            raise
        app.state.database = database
        app.state.product_repo = ProductRepository(database.SessionLocal)
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title="Products API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def body_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"errors": [_format_validation_error(e) for e in exc.errors()]},
        )

    app.include_router(health_router, tags=["health"])

    app.include_router(products_router, prefix="/products", tags=["products"])

    app.include_router(admin_router, tags=["admin"])

    # frontend, mounted last so it never shadows the API
    if settings.STATIC_DIR and os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        log.debug(f"static dir {settings.STATIC_DIR!r} not found, not serving frontend")

    return app


app = create_app()
