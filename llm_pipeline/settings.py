"""
settings.py
===========
Model client configuration resolved from the environment.

The credential and endpoint are captured once into an immutable
``ModelSettings`` value and handed to ``ModelClient`` at construction, so the
pipeline can be exercised in tests without touching ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MODEL       = "gemini-1.5-flash"
DEFAULT_BASE_URL    = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_TIMEOUT     = 60.0
DEFAULT_TEMPERATURE = 0.4
DEFAULT_MAX_TOKENS  = 2048


def _clean_env(name: str, default: str = "") -> str:
    value = os.getenv(name, default)
    return value.strip().strip('"').strip("'")


def _env_float(name: str, default: float) -> float:
    raw = _clean_env(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using default %s.", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = _clean_env(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using default %s.", name, raw, default)
        return default


@dataclass(frozen=True)
class ModelSettings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS

    @property
    def has_credential(self) -> bool:
        key = self.api_key.strip()
        return bool(key) and not key.startswith("your_")

    @classmethod
    def from_env(cls) -> "ModelSettings":
        return cls(
            api_key     = _clean_env("GEMINI_API_KEY", ""),
            model       = _clean_env("GEMINI_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
            base_url    = _clean_env("GEMINI_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            timeout     = _env_float("GEMINI_TIMEOUT", DEFAULT_TIMEOUT),
            temperature = _env_float("GEMINI_TEMPERATURE", DEFAULT_TEMPERATURE),
            max_tokens  = _env_int("GEMINI_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        )
