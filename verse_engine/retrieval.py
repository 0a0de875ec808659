"""
retrieval.py
============
Orchestrates a single topic → verses request:

  1. Validate the topic
  2. Check the model credential is configured
  3. Build the prompt (prompt_builder.build_prompt)
  4. Call the language model (ModelClient.generate)
  5. Strip formatting noise (sanitizer.clean)
  6. Parse + validate the reply against ModelReply
  7. Fall back to curated verses (knowledge_base.lookup) where the model path fails

Every outcome is returned in-band as a RetrievalResult with success=True;
callers inspect ``error`` and ``verses`` independently.  Nothing is retried.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from llm_pipeline.llm_engine import ModelClient
from verse_engine.knowledge_base import category_for, lookup
from verse_engine.models import ModelReply, RetrievalResult
from verse_engine.prompt_builder import build_prompt
from verse_engine.sanitizer import clean

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# In-band error messages
# ---------------------------------------------------------------------------
ERROR_TOPIC_REQUIRED  = "Topic is required"
ERROR_NOT_CONFIGURED  = "Gemini API key is not configured"
ERROR_MODEL_DEGRADED  = (
    "We encountered an issue generating AI responses. "
    "Using educational reference material instead."
)
ERROR_UNEXPECTED      = "Failed to process request"


def _error_details(exc: BaseException) -> str:
    return str(exc) or "Unknown error"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def retrieve_verses(topic: Any, client: Optional[ModelClient]) -> RetrievalResult:
    """Return related verses for *topic*, degrading to curated ones on failure."""
    try:
        return _retrieve(topic, client)
    except Exception as exc:
        logger.error("Error in find-verses pipeline: %s", exc, exc_info=True)
        return RetrievalResult(
            error   = ERROR_UNEXPECTED,
            details = _error_details(exc),
            lesson  = "",
            verses  = [],
        )


def _retrieve(topic: Any, client: Optional[ModelClient]) -> RetrievalResult:
    if not isinstance(topic, str) or not topic.strip():
        return RetrievalResult(error=ERROR_TOPIC_REQUIRED, lesson="", verses=[])

    if client is None or not client.is_configured:
        logger.error("GEMINI_API_KEY environment variable is not set")
        return RetrievalResult(error=ERROR_NOT_CONFIGURED, lesson=topic, verses=[])

    prompt = build_prompt(topic)

    try:
        raw_text = client.generate(prompt)
    except Exception as exc:
        logger.error("Error calling model: %s", exc)
        logger.info("Serving fallback verses (category=%s)", category_for(topic))
        return RetrievalResult(
            error   = ERROR_MODEL_DEGRADED,
            details = _error_details(exc),
            lesson  = topic,
            verses  = lookup(topic),
        )

    cleaned_text = clean(raw_text)
    logger.debug("Cleaned text: %s", cleaned_text)

    try:
        reply = ModelReply.model_validate(json.loads(cleaned_text))
    except (ValueError, ValidationError, RecursionError) as exc:
        logger.error("Error parsing AI response as JSON: %s", exc)
        logger.info("Raw AI response: %s", raw_text)
        logger.info("Cleaned response: %s", cleaned_text)
        return RetrievalResult(lesson=topic, verses=lookup(topic))

    logger.info("Parsed %d verses from model response", len(reply.verses or []))
    return RetrievalResult(
        lesson = reply.topic or topic,
        verses = list(reply.verses or []),
    )
