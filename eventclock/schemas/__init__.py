"""API Schemas - Pydantic response models for the diagnostics API.

Invariants:
    - Wall-clock fields serialize without offset; instant fields serialize with +00:00
"""
