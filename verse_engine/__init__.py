"""
verse_engine — topic → Bible verse retrieval pipeline.

Components:
  knowledge_base  — curated fallback verse sets and example topics
  sanitizer       — strips markdown fences / backticks from model output
  prompt_builder  — renders the model instruction prompt for a topic
  models          — Verse, ModelReply, RetrievalResult
  retrieval       — orchestrates prompt → model → parse → fallback
"""
