"""
api/health.py
=============
GET /api/health — liveness and readiness probe for the verse finder backend.
"""

from fastapi import APIRouter, Depends

from backend.api.find_verses import get_model_client
from backend.schemas.response import HealthResponse
from llm_pipeline.llm_engine import ModelClient
from verse_engine.knowledge_base import CATEGORY_NAMES

API_VERSION = "1.0.0"

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
async def health_check(client: ModelClient = Depends(get_model_client)):
    """Return service status and model configuration flags."""
    return HealthResponse(
        status              = "ok",
        llm_configured      = bool(client.is_configured),
        llm_model           = client.model,
        fallback_categories = CATEGORY_NAMES,
        api_version         = API_VERSION,
    )
