"""
FastAPI application setup and configuration.
Main entry point for the LeagueStats API service.

Architecture:
- Every route lives under /api
- League statistics are read-only (GET), except POST /api/league/reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse

from leaguestats.__version__ import __version__
from leaguestats.interfaces.api import league_if


# ----------------------------------------------------------------------
#  App lifecycle
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(_app_instance: FastAPI):
    """
    FastAPI lifespan context manager.

    Note: Application.start() is called by start_api.py BEFORE uvicorn runs.
    """
    from leaguestats.app import application

    logging.info("[API] FastAPI starting")

    try:
        yield
    finally:
        logging.info("[API] FastAPI shutting down...")
        application.stop()
        logging.info("[API] Shutdown complete")


# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
api_app = FastAPI(title="LeagueStats", version=__version__, lifespan=lifespan)


# Global exception handler
@api_app.exception_handler(Exception)
async def exception_handler(request, exc: Exception):
    logging.exception(f"[API] Exception: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ----------------------------------------------------------------------
#  Routers
# ----------------------------------------------------------------------
api_router = APIRouter(prefix="/api")
api_router.include_router(league_if.router)
api_app.include_router(api_router)
