"""Core Layer - pure time logic, no IO, no clock reads, no host database access.

Invariants:
    - No module in core/ imports from clock, api/, infrastructure/, or config
    - All functions are pure and deterministic given their inputs

Design Decisions:
    - Functional core separated from imperative shell: the shell injects the
      timezone lookup and the clock source, core only decides and converts
"""
