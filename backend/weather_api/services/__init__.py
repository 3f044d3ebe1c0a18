"""Services Layer: application services orchestrating core and repositories.

Invariants:
    - Services return Result / None for expected outcomes and let infrastructure errors propagate

Design Decisions:
    - One application class per resource (ADR: no god objects)
"""
