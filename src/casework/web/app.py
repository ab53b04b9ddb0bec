"""
Casework Coach Web API - FastAPI application.

Supabase Auth bearer tokens for caseworker routes; the action matcher and
knowledge endpoints work without a session.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from casework import __version__
from casework.config import settings
from casework.llm.prompt_logger import enable_prompt_logging, is_enabled
from casework.logging_config import configure_logging
from casework.web.action_routes import router as action_router
from casework.web.generation_routes import router as generation_router
from casework.web.knowledge_routes import router as knowledge_router
from casework.web.record_routes import router as record_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Casework Coach", version=__version__)


@app.on_event("startup")
async def startup_event():
    """Configure logging and report configuration on startup."""
    configure_logging()
    if settings.casework_log_prompts:
        enable_prompt_logging()

    logger.info("Casework Coach starting up...")
    logger.info(f"  Environment: {settings.casework_env}")
    logger.info(f"  Prompt file logging: {is_enabled()}")
    logger.info(f"  Datastore configured: {bool(settings.supabase_url)}")


# CORS middleware for the frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",  # Vite dev server
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(action_router, prefix="/api")
app.include_router(generation_router, prefix="/api")
app.include_router(knowledge_router, prefix="/api")
app.include_router(record_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
