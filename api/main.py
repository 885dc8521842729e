"""
FastAPI application for the Naturalization Interview session configurator.
Provides catalog, recommendation and session-plan endpoints for the learner app.

Run with: uvicorn api.main:app --reload --port 8000
"""
from pathlib import Path
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.sessions import router as sessions_router

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",  # Vite dev server
    "http://localhost:3000",  # Alternative dev port
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def get_cors_origins() -> list[str]:
    """Origins from CORS_ORIGINS (comma-separated), else the local dev servers."""
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or DEFAULT_CORS_ORIGINS


app = FastAPI(
    title="Naturalization Interview API",
    description="Session configuration for adaptive naturalization interview practice",
    version="1.0.0"
)

cors_origins = get_cors_origins()
logger.debug("CORS origins: %s", cors_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sessions_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Naturalization Interview API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
