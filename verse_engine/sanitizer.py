"""
sanitizer.py
============
Strip formatting noise from raw model output so it can be parsed as JSON.

Models asked for "raw JSON only" still wrap replies in markdown fences
(```json ... ```) or stray backticks often enough that parsing the text
as-is is not an option.  This is a normalisation step, not a validator:
malformed input comes back out malformed and the caller deals with it.
"""

from __future__ import annotations

import re
from typing import Any

_FENCE_OPEN  = re.compile(r"```(?:json|javascript|js)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"```\s*\Z")


def _clean_once(text: str) -> str:
    cleaned = _FENCE_OPEN.sub("", text)
    cleaned = _FENCE_CLOSE.sub("", cleaned)
    cleaned = cleaned.strip()

    if cleaned.startswith("`"):
        cleaned = cleaned[1:]
    if cleaned.endswith("`"):
        cleaned = cleaned[:-1]
    return cleaned


def clean(raw_text: Any) -> str:
    """Return a candidate JSON string extracted from *raw_text*.

    Never raises.  Passes repeat until nothing changes, so
    ``clean(clean(x)) == clean(x)`` holds for every input.
    """
    if raw_text is None:
        return ""
    text = raw_text if isinstance(raw_text, str) else str(raw_text)

    # every pass either shortens the text or is the last one
    while True:
        cleaned = _clean_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned
