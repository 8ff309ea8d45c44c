"""API Layer — FastAPI routes, error handlers and middleware.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes decode requests into params and delegate to services

Design Decisions:
    - Thin routes delegate to services; the mock registry arrives as a dependency
"""
