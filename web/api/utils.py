"""Shared API utilities."""
from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from content.store import ContentStore


def get_store(request: Request) -> ContentStore:
    """Dependency returning the store owned by the running app."""
    return request.app.state.store


def storage_error_message(exc: Exception) -> str:
    """Underlying driver message when there is one (e.g. 'UNIQUE constraint failed: ...')."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def request_error_message(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation errors into one line, e.g. 'body: Input should be a valid dictionary'."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', '')}" if loc else err.get("msg", ""))
    return "; ".join(parts) or "Invalid request"
