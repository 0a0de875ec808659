"""
models.py
=========
Pydantic v2 models shared by the verse-retrieval pipeline.

  Verse           — one reference / text / explanation triple (immutable)
  ModelReply      — validated shape of the language model's JSON reply
  RetrievalResult — the single response envelope returned for every request
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Verse(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference: str = Field(..., description="Citation, e.g. 'John 3:16'")
    text: str
    explanation: str


class ModelReply(BaseModel):
    """Shape requested from the model. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    topic: Optional[str] = None
    verses: Optional[List[Verse]] = None

    @field_validator("topic", mode="before")
    @classmethod
    def _drop_non_string_topic(cls, v: Any) -> Optional[str]:
        # non-string topics count as absent
        return v if isinstance(v, str) else None


class RetrievalResult(BaseModel):
    success: bool = True
    lesson: str = ""
    verses: List[Verse] = Field(default_factory=list)
    error: Optional[str] = None
    details: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the HTTP layer; unset error/details are omitted."""
        return self.model_dump(exclude_none=True)
