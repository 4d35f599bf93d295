"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py
    - All endpoints return structured JSON responses
"""
