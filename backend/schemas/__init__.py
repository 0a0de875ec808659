# backend/schemas/__init__.py
from backend.schemas.response import (
    ExampleTopicSchema,
    ExampleTopicsResponse,
    HealthResponse,
)
from verse_engine.models import RetrievalResult, Verse

__all__ = [
    "ExampleTopicSchema", "ExampleTopicsResponse", "HealthResponse",
    "RetrievalResult", "Verse",
]
