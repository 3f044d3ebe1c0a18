"""Weather API Package: Result-carrying CRUD pipeline for the Weather resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
