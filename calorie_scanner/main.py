"""
Purpose:
- FastAPI application factory and router mounts.
- Serves the single page at / and the scanner API under /api/v1/scanner.
- Uvicorn will serve this on settings.host:settings.port (see __main__.py).
"""

from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from .core.settings import settings
from .core.log_config import configure_logging
from .api.health import router as health_router
from .api.scanner import router as scanner_router

STATIC_DIR = Path(__file__).parent / "static"

def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Skaner Kalorii API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(scanner_router)
    # page last so API routes win
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="page")
    return app


app = create_app()
