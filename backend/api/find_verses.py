"""
api/find_verses.py
==================
POST /api/find-verses
---------------------
Accepts a JSON body ``{"lesson": "<topic>"}`` and returns a RetrievalResult.

The endpoint always answers HTTP 200.  Failures are reported in-band through
the ``error`` / ``details`` fields, and the body may still carry fallback
verses, so clients must check both ``error`` and ``verses``.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from llm_pipeline.llm_engine import ModelClient, build_model_client
from verse_engine.models import RetrievalResult
from verse_engine.retrieval import ERROR_UNEXPECTED, retrieve_verses

logger = logging.getLogger(__name__)

router = APIRouter()


def get_model_client(request: Request) -> ModelClient:
    """Shared ModelClient from app state, created on first use if missing."""
    client = getattr(request.app.state, "model_client", None)
    if client is None:
        client = build_model_client()
        request.app.state.model_client = client
    return client


@router.post("/api/find-verses")
async def find_verses(
    request: Request,
    client: ModelClient = Depends(get_model_client),
):
    """Find Bible verses related to the submitted lesson topic."""
    try:
        body = await request.json()
        lesson = body.get("lesson")

        # blocking model call; offloaded to the thread pool
        result = await asyncio.to_thread(retrieve_verses, lesson, client)

    except Exception as exc:
        logger.error("Error in find-verses API: %s", exc)
        result = RetrievalResult(
            error   = ERROR_UNEXPECTED,
            details = str(exc) or "Unknown error",
            lesson  = "",
            verses  = [],
        )

    return result.to_payload()
