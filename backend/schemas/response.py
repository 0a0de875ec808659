"""
schemas/response.py
===================
Pydantic v2 models for the auxiliary HTTP endpoints.

The find-verses payload itself is ``verse_engine.models.RetrievalResult``.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ExampleTopicSchema(BaseModel):
    title: str
    content: str


class ExampleTopicsResponse(BaseModel):
    examples: List[ExampleTopicSchema] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
    llm_configured: bool
    llm_model: str
    fallback_categories: List[str] = Field(default_factory=list)
    api_version: str
