"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response, success or failure, carries a boolean `success`

Design Decisions:
    - Thin routes delegate to services
"""
