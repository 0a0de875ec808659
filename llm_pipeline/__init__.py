"""
llm_pipeline — language-model access for verse retrieval.

Components:
  settings    — ModelSettings resolved from GEMINI_* environment variables
  llm_engine  — ModelClient (OpenAI-compatible chat completions) + error types
"""
