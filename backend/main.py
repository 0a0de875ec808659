"""
main.py
=======
FastAPI application entry point for the Bible verse finder.

Run locally:
  uvicorn backend.main:app --reload --port 8000

The lifespan handler builds the model client once at startup so the
credential is resolved a single time and never re-read per request.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv  # type: ignore
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.examples import router as examples_router
from backend.api.find_verses import router as find_verses_router
from backend.api.health import API_VERSION, router as health_router
from llm_pipeline.llm_engine import build_model_client

# Load .env from project root (one level above this file's package)
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: startup / shutdown
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared model client before the first request."""
    logger.info("Verse finder backend starting up…")

    if getattr(app.state, "model_client", None) is None:
        app.state.model_client = build_model_client()
    logger.info("Model client ready (model=%s, configured=%s).",
                app.state.model_client.model, app.state.model_client.is_configured)

    yield

    app.state.model_client.close()
    logger.info("Verse finder backend shutting down.")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> FastAPI:
    app = FastAPI(
        title       = "Verse Finder API",
        description = (
            "Topic-to-scripture lookup for lesson preparation: prompts a "
            "generative language model for related Bible verses and falls "
            "back to a curated verse table when the model is unavailable."
        ),
        version     = API_VERSION,
        docs_url    = "/docs",
        redoc_url   = "/redoc",
        lifespan    = lifespan,
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    frontend_url = os.getenv("FRONTEND_URL", "").strip()
    if frontend_url:
        origins.append(frontend_url)
    app.add_middleware(
        CORSMiddleware,
        allow_origins     = origins,
        allow_credentials = True,
        allow_methods     = ["*"],
        allow_headers     = ["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────
    app.include_router(health_router)
    app.include_router(examples_router)
    app.include_router(find_verses_router)

    return app


app = create_app()
