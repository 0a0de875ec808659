"""
api/examples.py
===============
GET /api/example-topics — starter topics a UI can offer as one-click chips.
"""

from fastapi import APIRouter

from backend.schemas.response import ExampleTopicSchema, ExampleTopicsResponse
from verse_engine.knowledge_base import EXAMPLE_TOPICS

router = APIRouter()


@router.get("/api/example-topics", response_model=ExampleTopicsResponse)
async def example_topics():
    return ExampleTopicsResponse(
        examples=[
            ExampleTopicSchema(title=topic.title, content=topic.content)
            for topic in EXAMPLE_TOPICS
        ]
    )
