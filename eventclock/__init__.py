"""Event Clock Package - reference-timezone time normalization for event wall-clock values.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: callers import eventclock.clock explicitly, no star exports
"""
