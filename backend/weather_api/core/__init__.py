"""Core Layer: domain entity, Result type, message table, repository contract.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Expected domain outcomes are values (Result, None), never exceptions

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
