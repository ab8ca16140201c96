"""Infrastructure Layer - host timezone database access and logging setup.

Invariants:
    - Only this layer and the clock shell touch host resources
    - Core modules never import from here

Design Decisions:
    - Plain functions over classes: each concern is a single entry point
"""
