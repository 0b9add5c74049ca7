"""Run the content API server. Run from project root: python web/run_api.py"""
import logging
import sys
from pathlib import Path

# Add project root to path so content imports work
_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_root))

import uvicorn

import config

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("holiday")

if __name__ == "__main__":
    logger.info("Server running at http://localhost:%d", config.PORT)
    logger.info("Admin page: http://localhost:%d/admin", config.PORT)
    # Uvicorn handles SIGINT and runs the app lifespan exit, which closes the database
    uvicorn.run(
        "web.api.main:app",
        host=config.HOST,
        port=config.PORT,
    )
