"""FastAPI content API - serves site settings, listings and bookings plus the static site."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

import config
from content.store import ContentStore
from web.api.routes import router as api_router
from web.api.settings_routes import router as settings_router
from web.api.utils import request_error_message, storage_error_message

logger = logging.getLogger("holiday.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await app.state.store.init()
    try:
        yield
    finally:
        await app.state.store.close()


async def _storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": storage_error_message(exc)})


async def _request_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": request_error_message(exc)})


def create_app(store: Optional[ContentStore] = None, frontend_dir: Optional[Path] = None) -> FastAPI:
    """Build the app around one ContentStore (a new one on config.DATABASE_URL if not given)."""
    frontend_dir = Path(frontend_dir or config.FRONTEND_DIR)

    app = FastAPI(title="Holiday Content API", lifespan=lifespan)
    app.state.store = store or ContentStore(config.DATABASE_URL, echo=config.SQL_ECHO)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, _storage_error_handler)
    # sqlite3 raises OverflowError unwrapped for ints beyond 64 bits
    app.add_exception_handler(OverflowError, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _request_error_handler)
    app.include_router(api_router)
    app.include_router(settings_router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    @app.get("/admin")
    async def admin_page():
        """Admin UI (plain HTML calling the /api routes)."""
        admin_path = frontend_dir / "admin.html"
        if not admin_path.exists():
            return JSONResponse(status_code=404, content={"error": "Admin page not found"})
        return FileResponse(str(admin_path), media_type="text/html")

    # Public site; mounted last so /api and /admin take precedence
    if frontend_dir.exists():
        app.mount("/", StaticFiles(directory=str(frontend_dir), html=True), name="frontend")

    return app


app = create_app()
