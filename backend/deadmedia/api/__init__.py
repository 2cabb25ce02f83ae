"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in create_app (no auto-discovery)
    - Error responses carry no body

Design Decisions:
    - Thin routes delegate to the store and services
"""
