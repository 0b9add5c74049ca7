"""Configuration for the holiday content store."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_ROOT = Path(__file__).parent

# Database
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{_ROOT / 'database.db'}",
)
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Static site and admin page
FRONTEND_DIR = Path(os.getenv("FRONTEND_DIR", str(_ROOT / "frontend")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
