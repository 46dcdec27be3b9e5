"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All bodies are JSON

Design Decisions:
    - Thin routes: one store call per handler, then shape the response
"""
