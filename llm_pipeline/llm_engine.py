"""
llm_engine.py
=============
Blocking text-generation client for the verse-retrieval pipeline.

Talks to any OpenAI-compatible chat-completions endpoint through the
``openai`` SDK.  The default target is Google's Gemini OpenAI-compatible
endpoint:
  • base_url : https://generativelanguage.googleapis.com/v1beta/openai/
  • model    : gemini-1.5-flash

One prompt in, one string out.  No streaming, no retries, no model
fallback list: a failed call is reported to the caller, which substitutes
curated verses instead.
"""

from __future__ import annotations

import logging
from typing import Optional

import openai
from openai import OpenAI

from llm_pipeline.settings import ModelSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ModelClientError(RuntimeError):
    """Base class for every failure raised by ``ModelClient.generate``."""


class ModelUnavailable(ModelClientError):
    """Raised when no usable API credential is configured."""


class ModelCallFailed(ModelClientError):
    """Raised on network / API errors or an empty completion."""


class ModelTimeout(ModelClientError):
    """Raised when the remote call exceeds the configured timeout."""


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class ModelClient:
    """Wraps a single chat-completion call behind ``generate(prompt)``."""

    def __init__(self, settings: ModelSettings):
        self._settings = settings
        self._client: Optional[OpenAI] = None
        if settings.has_credential:
            self._client = OpenAI(
                base_url    = settings.base_url,
                api_key     = settings.api_key,
                timeout     = settings.timeout,
                max_retries = 0,
            )

    @property
    def settings(self) -> ModelSettings:
        return self._settings

    @property
    def model(self) -> str:
        return self._settings.model

    @property
    def is_configured(self) -> bool:
        return self._settings.has_credential

    def generate(self, prompt: str) -> str:
        """
        Send *prompt* as a single user message and return the reply text.

        Raises
        ------
        ModelUnavailable : no credential configured
        ModelTimeout     : the SDK gave up waiting for the endpoint
        ModelCallFailed  : any other API / network failure, or an empty reply
        """
        if self._client is None:
            raise ModelUnavailable("Model API key is not configured.")

        client = self._client
        logger.info("Calling model %s for educational Bible study…", self.model)

        try:
            completion = client.chat.completions.create(
                model       = self.model,
                messages    = [{"role": "user", "content": prompt}],
                temperature = self._settings.temperature,
                max_tokens  = self._settings.max_tokens,
                stream      = False,
            )
        except openai.APITimeoutError as exc:
            logger.warning("Model call timed out after %.0fs: %s", self._settings.timeout, exc)
            raise ModelTimeout(f"Model request timed out: {exc}") from exc
        except openai.APIError as exc:
            logger.warning("Model call failed: %s", exc)
            raise ModelCallFailed(f"Model request failed: {exc}") from exc

        choices = getattr(completion, "choices", None) or []
        content = choices[0].message.content if choices and choices[0].message else None
        if not content or not content.strip():
            raise ModelCallFailed(f"{self.model}: empty response")

        logger.info("Received response from model %s (%d chars)", self.model, len(content))
        return content

    def close(self) -> None:
        """Release the SDK's HTTP connection pool."""
        if self._client is not None:
            self._client.close()
            self._client = None


def build_model_client(settings: Optional[ModelSettings] = None) -> ModelClient:
    """Construct a client from *settings*, or from the environment."""
    settings = settings or ModelSettings.from_env()
    if not settings.has_credential:
        logger.warning("GEMINI_API_KEY environment variable is not set")
    return ModelClient(settings)
