"""
backend — FastAPI application package.

Routers: api/find_verses.py, api/examples.py, api/health.py
Schemas: schemas/response.py
Entry point: main.py → run with `uvicorn backend.main:app --reload`
"""
