"""
prompt_builder.py
=================
Render the instruction prompt sent to the language model for a topic.
"""

from __future__ import annotations

import json

# ---------------------------------------------------------------------------
# Prompt template
# ---------------------------------------------------------------------------

_PROMPT_TEMPLATE = """
I'm an educator preparing a lesson on the following topic or principle:
"{topic}"

For educational purposes only, I need to find 3-5 Bible verses that relate to this topic.

For each verse:
1. Provide the specific Bible reference (book, chapter, and verse)
2. Include the verse text
3. Explain how this verse relates to the topic for educational study

This is strictly for educational and comparative religious studies purposes.

IMPORTANT: Return ONLY a raw JSON object with NO markdown formatting, NO code blocks, and NO backticks.

The JSON structure should be:
{{
  "topic": {topic_json},
  "verses": [
    {{
      "reference": "Book Chapter:Verse",
      "text": "The verse text",
      "explanation": "Educational explanation of how this relates to the topic"
    }}
  ]
}}
"""


def build_prompt(topic: str) -> str:
    """Return the full prompt for *topic*. Pure; no side effects."""
    return _PROMPT_TEMPLATE.format(
        topic      = topic,
        topic_json = json.dumps(topic, ensure_ascii=False),
    )
