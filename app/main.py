# main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

# Import logging utilities early so that the logger configuration is
# applied before any other modules emit log messages.  The logger is
# used throughout the application for structured JSON logging.
from app.logging_config import logger
import json
import time

from app.clients.http_client import HTTPClient
from app.clients.store_client import StoreClient
from app.core.config import get_settings
from app.core.errors import FetchError
from app.routes.catalog import router as catalog_router
from app.services.catalog_service import CatalogCache


@asynccontextmanager
async def lifespan(app: FastAPI):
    # one HTTP client and one catalog cache per process
    settings = get_settings()
    app.state.http_client = HTTPClient()
    store = StoreClient(app.state.http_client, settings.store_url, settings.store_api_key)
    app.state.catalog = CatalogCache(store, ttl=settings.catalog_ttl_seconds, table=settings.store_table)
    try:
        yield
    finally:
        await app.state.http_client.close()


def create_app() -> FastAPI:
    app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)

    app.include_router(catalog_router)

    @app.exception_handler(FetchError)
    async def fetch_error_handler(request: Request, exc: FetchError):
        return ORJSONResponse(status_code=502, content={"detail": str(exc)})

    # -----------------------------------------------------------------
    # Request logging middleware
    # -----------------------------------------------------------------
    # Records path, method, status code and processing time of every
    # incoming request as a JSON line.
    @app.middleware("http")  # type: ignore[misc]
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        # unhandled exceptions end up as a 500
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            duration_ms = (time.time() - start_time) * 1000
            logger.info(json.dumps({
                "event": "http_request",
                "path": request.url.path,
                "method": request.method,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            }))

    return app

app = create_app()
