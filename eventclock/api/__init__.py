"""API Layer - FastAPI routes and error handlers for clock diagnostics.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to eventclock.clock; no time logic lives here
"""
